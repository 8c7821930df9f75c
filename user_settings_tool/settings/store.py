from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Type, TypeVar, Union

from . import codec
from .errors import (
    NoSettingsFileError,
    SettingConversionError,
    SettingNotFoundError,
    SettingsFileError,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
T = TypeVar("T", int, float, bool)


def _settings_home() -> Path:
    return Path.home() / ".user_settings_tool"


def default_settings_path(filename: str = "settings.cfg") -> Path:
    """Conventional location for a host application's settings file."""
    return _settings_home() / filename


class SettingsStore:
    """In-memory ``key=value`` settings backed by a plain text file.

    All values are kept as strings; the typed accessors convert on the way in
    and out. A single lock serializes every public operation, including file
    I/O, so the store can be shared between threads.

    ``save()`` writes back to the file last passed to ``load()``. ``save_as()``
    writes elsewhere without changing that target.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding
        self._settings: Dict[str, str] = {}
        self._current_filename: Optional[Path] = None
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"SettingsStore(entries={len(self)}, current_filename={self.current_filename!r})"

    # Files ---------------------------------------------------------------
    @property
    def current_filename(self) -> Optional[Path]:
        with self._lock:
            return self._current_filename

    def ensure_file_exists(self, path: PathLike) -> None:
        """Create an empty settings file at ``path`` unless one exists already."""

        path = Path(path)
        with self._lock:
            if path.exists():
                return
            try:
                # "x" so a file created concurrently is never truncated
                with open(path, "x", encoding=self.encoding):
                    pass
            except FileExistsError:
                return
            except OSError as exc:
                raise SettingsFileError(f"Unable to create settings file: {path}", path) from exc
            logger.debug("Created empty settings file %s", path)

    def load(self, path: PathLike) -> None:
        """Replace the current settings with the contents of ``path``.

        The store is left untouched if the file cannot be read.
        """

        path = Path(path)
        with self._lock:
            try:
                # surrogateescape: bytes that don't decode survive a save unchanged
                with open(path, "r", encoding=self.encoding, errors="surrogateescape", newline="") as fh:
                    # split on "\n" only; a stray "\r" belongs to the value
                    parsed = codec.parse_lines(fh.read().split("\n"))
            except (OSError, UnicodeDecodeError) as exc:
                raise SettingsFileError(f"Unable to open settings file: {path}", path) from exc
            self._settings = parsed
            self._current_filename = path
            logger.debug("Loaded %d settings from %s", len(parsed), path)

    def save(self) -> None:
        """Write the settings back to the file they were loaded from."""

        with self._lock:
            if self._current_filename is None:
                raise NoSettingsFileError()
            self._write(self._current_filename)

    def save_as(self, path: PathLike) -> None:
        """Write the settings to ``path``, truncating it.

        Does not change the target of a later ``save()``.
        """

        with self._lock:
            self._write(Path(path))

    def _write(self, path: Path) -> None:
        # Caller holds the lock.
        try:
            fh = open(path, "w", encoding=self.encoding, errors="surrogateescape", newline="")
        except OSError as exc:
            raise SettingsFileError(f"Unable to open settings file: {path}", path) from exc
        try:
            with fh:
                fh.write(codec.format_entries(self._settings))
        except (OSError, UnicodeEncodeError) as exc:
            raise SettingsFileError(f"Unable to write settings file: {path}", path) from exc
        logger.debug("Saved %d settings to %s", len(self._settings), path)

    # String access ---------------------------------------------------------
    def get(self, key: str) -> str:
        with self._lock:
            try:
                return self._settings[key]
            except KeyError:
                raise SettingNotFoundError(key) from None

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(
                f"Setting values must be str, got {type(value).__name__}; use set_as() for typed values"
            )
        with self._lock:
            self._settings[key] = value

    # Typed access ----------------------------------------------------------
    def get_as(self, key: str, type_: Type[T]) -> T:
        """Read ``key`` and convert it to ``int``, ``float`` or ``bool``.

        Numbers are parsed strictly and raise :class:`SettingConversionError`
        on bad input. Booleans never fail: only ``"true"`` and ``"1"`` are True.
        """

        parse, _ = codec.converter_for(type_)
        value = self.get(key)
        try:
            return parse(value)  # type: ignore[return-value]
        except SettingConversionError as exc:
            raise SettingConversionError(value, exc.type_name, key=key) from None

    def set_as(self, key: str, value: Union[int, float, bool]) -> None:
        _, fmt = codec.converter_for(codec.type_of(value))
        self.set(key, fmt(value))

    def get_int(self, key: str) -> int:
        return self.get_as(key, int)

    def get_float(self, key: str) -> float:
        return self.get_as(key, float)

    def get_bool(self, key: str) -> bool:
        return self.get_as(key, bool)

    def set_int(self, key: str, value: int) -> None:
        self.set(key, codec.from_int(value))

    def set_float(self, key: str, value: float) -> None:
        self.set(key, codec.from_float(value))

    def set_bool(self, key: str, value: bool) -> None:
        self.set(key, codec.from_bool(value))

    # Introspection ---------------------------------------------------------
    def contains(self, key: str) -> bool:
        with self._lock:
            return key in self._settings

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._settings)

    def snapshot(self) -> Dict[str, str]:
        """Return a copy of all entries."""
        with self._lock:
            return dict(self._settings)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._settings)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())


# Process-wide default store ----------------------------------------------
_default_store: Optional[SettingsStore] = None
_default_lock = threading.Lock()


def get_default_store() -> SettingsStore:
    """Return the process-wide store, creating it on first use.

    Prefer constructing a :class:`SettingsStore` and passing it around; this
    exists for hosts that want a single shared instance.
    """

    global _default_store
    with _default_lock:
        if _default_store is None:
            _default_store = SettingsStore()
        return _default_store


def reset_default_store() -> None:
    """Drop the process-wide store so the next access starts empty."""

    global _default_store
    with _default_lock:
        _default_store = None
