"""Logging-related utilities.

The library itself only emits records through module loggers; configuring
handlers is left to the host application. The command line front end uses
:func:`setup_logging`.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def parse_level(level: Union[str, int]) -> int:
    """Accept ``"debug"``/``"INFO"``/``20`` style levels."""

    if isinstance(level, int):
        return level
    name = str(level).strip().upper()
    value = logging.getLevelName(name)
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def setup_logging(level: Union[str, int] = logging.WARNING, log_file: Optional[Path] = None) -> None:
    """Configure the root logger for command line use.

    Don't clobber an existing logging configuration (e.g. when embedded).
    """

    level_no = parse_level(level)
    root = logging.getLogger()
    if root.handlers:
        return

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(log_file), mode="a", encoding="utf-8"))

    logging.basicConfig(level=level_no, format=LOG_FORMAT, handlers=handlers)
