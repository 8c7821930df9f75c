"""Flat ``key=value`` settings files.

A host application keeps its user settings in a single text file, one
``key=value`` entry per line. :class:`SettingsStore` loads such a file into
memory, hands out values as strings or as ``int``/``float``/``bool``, and
writes them back.

Design notes:
  * Values are always stored as strings; typed access is a conversion
  * One lock per store, held for every operation
  * Plain truncating writes (no atomic rename, no cross-process locking)
"""

from .errors import (
    NoSettingsFileError,
    SettingConversionError,
    SettingNotFoundError,
    SettingsError,
    SettingsFileError,
)
from .store import SettingsStore, default_settings_path, get_default_store, reset_default_store

__all__ = [
    "SettingsStore",
    "default_settings_path",
    "get_default_store",
    "reset_default_store",
    "SettingsError",
    "SettingsFileError",
    "SettingNotFoundError",
    "SettingConversionError",
    "NoSettingsFileError",
]
