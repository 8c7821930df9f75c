from __future__ import annotations

from pathlib import Path

import pytest

from user_settings_tool.cli import main


def test_cli_touch_creates_file(tmp_path: Path) -> None:
    p = tmp_path / "settings.cfg"
    assert main([str(p), "touch"]) == 0
    assert p.is_file()


def test_cli_set_get_list(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = tmp_path / "settings.cfg"

    assert main([str(p), "--create", "set", "name", "Ada"]) == 0
    assert main([str(p), "set", "--type", "int", "age", "36"]) == 0
    assert main([str(p), "set", "--type", "bool", "admin", "1"]) == 0
    capsys.readouterr()

    assert main([str(p), "get", "name"]) == 0
    assert capsys.readouterr().out == "Ada\n"

    assert main([str(p), "get", "--type", "int", "age"]) == 0
    assert capsys.readouterr().out == "36\n"

    assert main([str(p), "get", "--type", "bool", "admin"]) == 0
    assert capsys.readouterr().out == "true\n"

    assert main([str(p), "list"]) == 0
    out = capsys.readouterr().out
    assert sorted(out.splitlines()) == ["admin=true", "age=36", "name=Ada"]


def test_cli_errors_exit_one(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = tmp_path / "settings.cfg"

    # Missing file without --create
    assert main([str(p), "get", "x"]) == 1
    assert "error:" in capsys.readouterr().err

    p.write_text("age=old\n", encoding="utf-8")
    assert main([str(p), "get", "missing"]) == 1
    assert main([str(p), "get", "--type", "int", "age"]) == 1
    assert main([str(p), "set", "--type", "float", "ratio", "abc"]) == 1
    assert p.read_text(encoding="utf-8") == "age=old\n"


def test_cli_usage_error_exit_two(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "settings.cfg"), "frobnicate"])
    assert excinfo.value.code == 2


def test_cli_unwritable_log_file_is_usage_error(tmp_path: Path) -> None:
    import logging

    blocker = tmp_path / "not_a_dir"
    blocker.write_text("", encoding="utf-8")

    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    for h in saved_handlers:
        root.removeHandler(h)
    try:
        with pytest.raises(SystemExit) as excinfo:
            main(["--log-file", str(blocker / "x.log"), str(tmp_path / "settings.cfg"), "touch"])
        assert excinfo.value.code == 2
        assert not root.handlers
    finally:
        for h in saved_handlers:
            root.addHandler(h)
