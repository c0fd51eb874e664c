#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
===============================================================================
GPT‑Edit ▸ Edit Pipeline
===============================================================================

    Start → GateCheck → Abort
                      ↘ ReadFile → RequestEdit → WriteFile → StageInteractive → Done
                                                           ↘ Done (--no-patch)

* GateCheck asks the VCS whether the file is tracked. Untracked or unknown
  status requires one explicit "y"/"yes" from the operator; anything else
  ends the run with `EditOutcome.CANCELLED` and the file untouched.
* Every failure after the gate raises and ends the run. Nothing is retried
  and nothing is rolled back.
* The file is overwritten in place with the model's text plus one newline.
"""
from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional, TextIO

from gpt_edit import get_logger
from gpt_edit.api_client import request_edit
from gpt_edit.confirm import UNKNOWN_STATUS_WARNING, UNTRACKED_WARNING, confirm_continue
from gpt_edit.errors import FileReadError, FileWriteError
from gpt_edit.git_ops import VcsBackend

log = get_logger(__name__)


@dataclass(frozen=True)
class EditParams:
    """Invocation parameters, fixed for the whole run."""
    file: Path
    prompt: str
    model: str
    no_patch: bool = False


class EditOutcome(enum.Enum):
    CANCELLED = "cancelled"
    EDITED = "edited"
    STAGED = "staged"


def _passes_gate(path: Path, vcs: VcsBackend, stdin: TextIO, stdout: TextIO) -> bool:
    tracked = vcs.is_tracked(path)
    if tracked is True:
        return True
    warning = UNTRACKED_WARNING if tracked is False else UNKNOWN_STATUS_WARNING
    return confirm_continue(warning, stdin=stdin, stdout=stdout)


def _read_text(path: Path) -> str:
    try:
        with path.open("r", encoding="utf-8", newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(f"Could not read the input file {path}: {exc}") from exc


def _write_text(path: Path, content: str) -> None:
    try:
        # newline="" on both sides: no line-ending translation
        with path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(content + "\n")
    except OSError as exc:
        raise FileWriteError(f"Failed to write updated content to {path}: {exc}") from exc


def run_edit(
    params: EditParams,
    *,
    vcs: VcsBackend,
    client: Any = None,
    make_client: Optional[Callable[[], Any]] = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    api_timeout: Optional[float] = None,
) -> EditOutcome:
    """
    Run the full edit pipeline for one file.

    Parameters
    ----------
    params : EditParams
        File, prompt, model and the staging switch.
    vcs : VcsBackend
        Tracking query & interactive staging.
    client : Any
        Chat completions client (`chat.completions.create`).
    make_client : callable | None
        Builds the client on demand when *client* is None, so credentials
        are only required once the gate has been passed.
    stdin, stdout : TextIO | None
        Operator streams for the confirmation prompt and printed request.
    api_timeout : float | None
        Optional request timeout forwarded to the client.

    Returns
    -------
    EditOutcome
        CANCELLED if the operator declined, STAGED after `git add --patch`,
        EDITED when staging was skipped.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    if not _passes_gate(params.file, vcs, stdin, stdout):
        log.info("Operator declined to overwrite %s", params.file)
        return EditOutcome.CANCELLED

    original = _read_text(params.file)
    if client is None:
        if make_client is None:
            raise ValueError("run_edit needs either client or make_client")
        client = make_client()
    revised = request_edit(
        original,
        params.prompt,
        params.model,
        client=client,
        api_timeout=api_timeout,
        out=stdout,
    )
    _write_text(params.file, revised)
    log.info("Wrote %d chars to %s", len(revised) + 1, params.file)

    if params.no_patch:
        return EditOutcome.EDITED

    vcs.stage_interactive(params.file)
    return EditOutcome.STAGED


__all__ = ["EditParams", "EditOutcome", "run_edit"]
