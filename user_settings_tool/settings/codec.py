"""Line format and value conversions for settings files.

A settings file holds one entry per line::

    key=value

The key is everything before the first ``=``, the value everything after it
(further ``=`` characters included). There is no escaping, quoting or comment
syntax, and whitespace is kept as-is. Lines without ``=`` are ignored.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Dict, Iterable, Mapping, Optional, Tuple

from .errors import SettingConversionError

logger = logging.getLogger(__name__)

SEPARATOR = "="

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[+-]?(?:inf|infinity|nan)",
    re.IGNORECASE,
)

# Strings that read back as True. Everything else is False.
TRUE_STRINGS = frozenset({"true", "1"})


def parse_line(line: str) -> Optional[Tuple[str, str]]:
    """Split a single line into ``(key, value)``.

    Only the line terminator ``\\n`` is stripped. Returns ``None`` for lines
    that carry no ``=``.
    """

    if line.endswith("\n"):
        line = line[:-1]
    key, sep, value = line.partition(SEPARATOR)
    if not sep:
        return None
    return key, value


def parse_lines(lines: Iterable[str]) -> Dict[str, str]:
    """Parse an iterable of lines into a mapping (last duplicate wins)."""

    out: Dict[str, str] = {}
    for lineno, line in enumerate(lines, start=1):
        entry = parse_line(line)
        if entry is None:
            if line in ("", "\n"):
                continue
            logger.debug("Skipping malformed settings line %d", lineno)
            continue
        key, value = entry
        out[key] = value
    return out


def format_entries(entries: Mapping[str, str]) -> str:
    return "".join(f"{key}{SEPARATOR}{value}\n" for key, value in entries.items())


# Typed conversions ---------------------------------------------------------
def to_int(value: str) -> int:
    if not _INT_RE.fullmatch(value):
        raise SettingConversionError(value, "int")
    return int(value)


def to_float(value: str) -> float:
    if not _FLOAT_RE.fullmatch(value):
        raise SettingConversionError(value, "float")
    return float(value)


def to_bool(value: str) -> bool:
    """Permissive: only ``"true"`` and ``"1"`` are True, nothing ever fails."""
    return value in TRUE_STRINGS


def from_int(value: int) -> str:
    return str(int(value))


def from_float(value: float) -> str:
    # repr() gives the shortest text that reads back to the same float
    return repr(float(value))


def from_bool(value: bool) -> str:
    return "true" if value else "false"


Converter = Tuple[Callable[[str], object], Callable[..., str]]

CONVERTERS: Dict[type, Converter] = {
    bool: (to_bool, from_bool),
    int: (to_int, from_int),
    float: (to_float, from_float),
}


def converter_for(type_: type) -> Converter:
    try:
        return CONVERTERS[type_]
    except KeyError:
        supported = ", ".join(t.__name__ for t in CONVERTERS)
        raise TypeError(f"Unsupported setting type {type_!r} (supported: {supported})") from None


def type_of(value: object) -> type:
    """Return the converter type for a Python value (``bool`` before ``int``)."""

    for type_ in CONVERTERS:
        if isinstance(value, type_):
            return type_
    raise TypeError(f"Unsupported setting value type {type(value).__name__}")
