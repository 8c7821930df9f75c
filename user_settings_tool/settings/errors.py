"""Error types raised by the settings store.

Every error derives from :class:`SettingsError`, and additionally from the
builtin exception a caller would naturally expect (``OSError`` for file
problems, ``KeyError`` for missing keys, ``ValueError`` for bad numbers), so
existing ``except`` clauses keep working.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class SettingsError(Exception):
    """Base class for all settings store errors."""


class SettingsFileError(SettingsError, OSError):
    """A settings file could not be created, opened, read or written."""

    def __init__(self, message: str, path: Union[str, Path, None] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class SettingNotFoundError(SettingsError, KeyError):
    """The requested key is not present in the store."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        # KeyError would repr() the key
        return f"Setting not found: {self.key}"


class SettingConversionError(SettingsError, ValueError):
    """A stored value cannot be parsed as the requested type."""

    def __init__(self, value: str, type_name: str, key: Optional[str] = None):
        self.value = value
        self.type_name = type_name
        self.key = key
        if key is None:
            msg = f"Cannot convert {value!r} to {type_name}"
        else:
            msg = f"Cannot convert setting {key!r}={value!r} to {type_name}"
        super().__init__(msg)


class NoSettingsFileError(SettingsError):
    """``save()`` was called before any settings file was loaded."""

    def __init__(self, message: str = "No filename specified for saving settings."):
        super().__init__(message)
