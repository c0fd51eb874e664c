#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
===============================================================================
GPT‑Edit ▸ Operator confirmation
===============================================================================

A single yes/no question asked before overwriting a file whose history git
cannot restore. Only "y" / "yes" (any case, surrounding whitespace ignored)
continue; everything else, including an empty line or EOF, declines.
"""
from __future__ import annotations

from typing import TextIO

_RED = "\x1b[31m"
_YELLOW = "\x1b[33m"
_RESET = "\x1b[0m"

UNTRACKED_WARNING = (
    f"{_RED}WARNING: FILE NOT TRACKED BY GIT. The file will be OVERWRITTEN with no way "
    f"to revert it. Do you want to continue? (y/N) {_RESET}"
)
UNKNOWN_STATUS_WARNING = (
    f"{_YELLOW}WARNING: Unable to determine git status. The file may be overwritten with "
    f"no way to revert it. Do you want to continue? (y/N) {_RESET}"
)

_ACCEPT = {"y", "yes"}


def confirm_continue(message: str, *, stdin: TextIO, stdout: TextIO) -> bool:
    """Show *message*, read one line from *stdin* and return True on y/yes."""
    stdout.write(message)
    stdout.flush()

    answer = stdin.readline()
    if answer.strip().lower() not in _ACCEPT:
        stdout.write("Operation cancelled.\n")
        stdout.flush()
        return False
    return True


__all__ = ["confirm_continue", "UNTRACKED_WARNING", "UNKNOWN_STATUS_WARNING"]
