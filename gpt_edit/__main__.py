#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
===============================================================================
GPT‑Edit ▸ Module Entry Point  (python -m gpt_edit)
===============================================================================

Canonical invocation:
    python -m gpt_edit <file> <prompt> [--model NAME] [--no-patch]

What this does
--------------
* Handles a fast `--version` path without importing the CLI stack.
* Logs a concise startup banner (version, Python, platform) at DEBUG.
* Delegates to `gpt_edit.cli:main` and exits with its return code, so
  `python -m gpt_edit` and the `gpt-edit` console script behave identically.
"""
from __future__ import annotations

import argparse
import platform
import sys
from importlib.metadata import PackageNotFoundError, version as _pkg_version


def _parse_cli(argv: list[str]) -> tuple[argparse.Namespace, list[str]]:
    """
    Extract global flags (currently just --version) and leave the rest
    for the real CLI to parse.
    """
    parser = argparse.ArgumentParser(prog="python -m gpt_edit", add_help=False)
    parser.add_argument("--version", action="store_true")
    return parser.parse_known_args(argv)


def _resolve_version() -> str:
    """
    Resolve the installed package version **without importing** gpt_edit,
    falling back to `gpt_edit.__version__` for source checkouts.
    """
    try:
        return _pkg_version("gpt-edit")
    except PackageNotFoundError:
        from gpt_edit import __version__

        return __version__


def main() -> None:
    args, remaining = _parse_cli(sys.argv[1:])
    if args.version:
        print(_resolve_version())
        sys.exit(0)

    from gpt_edit import get_logger
    from gpt_edit.cli import main as cli_main

    get_logger(__name__).debug(
        "GPT‑Edit %s  |  Python %s  |  %s",
        _resolve_version(),
        platform.python_version(),
        platform.platform(),
    )
    sys.exit(cli_main(remaining))


if __name__ == "__main__":
    main()
