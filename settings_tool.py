#!/usr/bin/env python3
"""Convenience entry point.

Runs the `user_settings_tool` command line interface from a source checkout.
"""

from user_settings_tool.api import *  # re-export for convenience
from user_settings_tool.cli import main as _main


if __name__ == "__main__":
    raise SystemExit(_main())
