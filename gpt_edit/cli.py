#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
===============================================================================
GPT‑Edit ▸ Command Line Interface
===============================================================================

Usage
-----
    gpt-edit <file> <prompt> [--model NAME] [--no-patch]

Rewrites <file> with an LLM following <prompt>, then runs
`git add --patch <file>` so the operator can pick which hunks to keep.

Options
-------
• -m, --model      – model id (default: $GPT_EDIT_MODEL or gpt-4o-mini)
• -n, --no-patch   – skip `git add --patch` (e.g. to inspect changes in an IDE)
• --version        – print package version

Exit codes
----------
0 success or operator declined · 1 fatal error · 2 usage error · 130 Ctrl‑C

Examples
--------
  gpt-edit src/app.py "add type hints to every function"
  gpt-edit README.md "fix typos" -m gpt-4o -n
"""
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Optional

from gpt_edit import get_logger, get_version
from gpt_edit.api_client import create_client
from gpt_edit.config import EditConfig
from gpt_edit.editor import EditParams, run_edit
from gpt_edit.errors import GptEditError
from gpt_edit.git_ops import GitOps

log = get_logger(__name__)

DEFAULT_MODEL = os.getenv("GPT_EDIT_MODEL") or "gpt-4o-mini"


def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="gpt-edit",
        description="Edit a file in place with an LLM, then stage the result with git add --patch.",
    )
    p.add_argument("file", type=Path, help="Path to the file to be processed.")
    p.add_argument("prompt", help="Prompt to provide to the LLM.")
    p.add_argument(
        "-m", "--model", default=DEFAULT_MODEL, help=f"Model to use for the request (default: {DEFAULT_MODEL})"
    )
    p.add_argument(
        "-n",
        "--no-patch",
        action="store_true",
        help="Do not run `git add --patch` at the end (for example, to inspect changes within your IDE).",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    return p


def main(argv: Optional[list[str]] = None) -> int:
    try:
        args = _parser().parse_args(argv)
        params = EditParams(
            file=args.file,
            prompt=args.prompt,
            model=args.model,
            no_patch=args.no_patch,
        )
        config = EditConfig.from_env()
        log.debug("Edit run | file=%s | model=%s | no_patch=%s", params.file, params.model, params.no_patch)

        outcome = run_edit(
            params,
            vcs=GitOps(config.cwd),
            make_client=lambda: create_client(config),
            api_timeout=config.api_timeout,
        )
        log.info("Edit finished: %s", outcome.value)
        return 0
    except KeyboardInterrupt:
        log.info("Interrupted by user (Ctrl‑C).")
        return 130
    except SystemExit as exc:
        # argparse usage errors (2), --help / --version (0)
        return int(exc.code) if isinstance(exc.code, int) else 1
    except GptEditError as exc:
        log.error("%s", exc)
        return 1
    except Exception as exc:
        log.exception("Fatal error in CLI: %s", exc)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
