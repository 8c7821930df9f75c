from __future__ import annotations

import logging
from pathlib import Path

import pytest

from user_settings_tool.log_utils import parse_level, setup_logging


def test_parse_level_accepts_names_and_numbers() -> None:
    assert parse_level("debug") == logging.DEBUG
    assert parse_level(" Info ") == logging.INFO
    assert parse_level(logging.ERROR) == logging.ERROR
    with pytest.raises(ValueError):
        parse_level("chatty")


def test_setup_logging_keeps_existing_handlers() -> None:
    root = logging.getLogger()
    sentinel = logging.NullHandler()
    root.addHandler(sentinel)
    try:
        before = list(root.handlers)
        setup_logging("debug")
        assert root.handlers == before
    finally:
        root.removeHandler(sentinel)


def test_setup_logging_installs_stream_and_file_handlers(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    for h in saved_handlers:
        root.removeHandler(h)
    log_path = tmp_path / "logs" / "x.log"
    try:
        setup_logging("info", log_file=log_path)
        assert root.level == logging.INFO
        assert any(isinstance(h, logging.FileHandler) for h in root.handlers)
        assert any(type(h) is logging.StreamHandler for h in root.handlers)

        logging.getLogger("user_settings_tool.test").info("hello file")
        for h in root.handlers:
            h.flush()
        assert "[INFO] hello file" in log_path.read_text(encoding="utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
