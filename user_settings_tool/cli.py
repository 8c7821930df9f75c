"""Command line interface for User Settings Tool."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .log_utils import setup_logging
from .settings import SettingsError, SettingsStore
from .settings import codec

logger = logging.getLogger(__name__)

_TYPES = {"str": str, "int": int, "float": float, "bool": bool}


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return codec.from_bool(value)
    return str(value)


def _cmd_get(store: SettingsStore, args: argparse.Namespace) -> int:
    type_ = _TYPES[args.type]
    if type_ is str:
        value: object = store.get(args.key)
    else:
        value = store.get_as(args.key, type_)
    print(_format_value(value))
    return 0


def _cmd_set(store: SettingsStore, args: argparse.Namespace) -> int:
    type_ = _TYPES[args.type]
    if type_ is str:
        store.set(args.key, args.value)
    else:
        # Parse first so a bad number never reaches the file
        parse, _ = codec.converter_for(type_)
        store.set_as(args.key, parse(args.value))
    store.save()
    logger.info("Set %s in %s", args.key, store.current_filename)
    return 0


def _cmd_list(store: SettingsStore, args: argparse.Namespace) -> int:
    sys.stdout.write(codec.format_entries(store.snapshot()))
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Read and write flat key=value settings files.")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    ap.add_argument("file", help="Path to the settings file")
    ap.add_argument("--create", action="store_true", help="Create an empty settings file if it does not exist")
    ap.add_argument("--log-level", type=str, default="warning", help="Logging level (debug, info, warning, error)")
    ap.add_argument("--log-file", type=str, default=None, help="Also append log records to this file")

    sub = ap.add_subparsers(dest="command", required=True)

    p_get = sub.add_parser("get", help="Print the value of a setting")
    p_get.add_argument("key")
    p_get.add_argument("--type", choices=sorted(_TYPES), default="str")

    p_set = sub.add_parser("set", help="Set a value and save the file")
    p_set.add_argument("key")
    p_set.add_argument("value")
    p_set.add_argument("--type", choices=sorted(_TYPES), default="str")

    sub.add_parser("list", help="Print all entries as key=value lines")
    sub.add_parser("touch", help="Create the settings file if it does not exist")
    return ap


_COMMANDS = {
    "get": _cmd_get,
    "set": _cmd_set,
    "list": _cmd_list,
}


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    try:
        setup_logging(args.log_level, log_file=Path(args.log_file) if args.log_file else None)
    except (ValueError, OSError) as exc:
        ap.error(str(exc))

    store = SettingsStore()
    path = Path(args.file)
    try:
        if args.command == "touch" or args.create:
            store.ensure_file_exists(path)
        if args.command == "touch":
            return 0
        store.load(path)
        return _COMMANDS[args.command](store, args)
    except SettingsError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
