"""Public API surface.

This module re-exports the most commonly used functions/classes so host
applications can simply import a single module.
"""

from __future__ import annotations

from . import __version__

# Store
from .settings.store import SettingsStore, default_settings_path, get_default_store, reset_default_store

# Errors
from .settings.errors import (
    NoSettingsFileError,
    SettingConversionError,
    SettingNotFoundError,
    SettingsError,
    SettingsFileError,
)

# Line format / conversions
from .settings.codec import format_entries, parse_line, parse_lines

__all__ = [
    "__version__",
    # store
    "SettingsStore",
    "default_settings_path",
    "get_default_store",
    "reset_default_store",
    # errors
    "SettingsError",
    "SettingsFileError",
    "SettingNotFoundError",
    "SettingConversionError",
    "NoSettingsFileError",
    # codec
    "parse_line",
    "parse_lines",
    "format_entries",
]
