#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
===============================================================================
GPT‑Edit ▸ Git helpers
===============================================================================

Responsibilities
----------------
* Report whether a path is tracked by git (the overwrite safety gate).
* Hand the terminal to `git add --patch <path>` after an edit.

The pipeline only talks to the `VcsBackend` protocol; `GitOps` is the
subprocess‑backed implementation and tests substitute an in‑memory fake.

Usage (example)
---------------
    from pathlib import Path
    from gpt_edit.git_ops import GitOps

    vcs = GitOps(Path.cwd())
    vcs.is_tracked(Path("src/app.py"))   # True / False / None (unknown)
    vcs.stage_interactive(Path("src/app.py"))
"""
from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

from gpt_edit import get_logger
from gpt_edit.errors import GitCommandError

log = get_logger(__name__)


class VcsBackend(Protocol):
    """Capabilities the edit pipeline needs from version control."""

    def is_tracked(self, path: Path) -> Optional[bool]:
        """True if tracked, False if not, None if the status cannot be determined."""
        ...

    def stage_interactive(self, path: Path) -> None:
        """Interactively stage hunks of *path*; raise GitCommandError on failure."""
        ...


@dataclass(frozen=True)
class GitRunResult:
    """Simple carrier for git command results."""
    ok: bool
    code: int
    out: str
    err: str


class GitOps:
    """
    `VcsBackend` implemented with the `git` executable.

    Commands run with *cwd* as their working directory so relative file paths
    given on the command line resolve the same way they do for the operator.
    """

    def __init__(self, cwd: Path, git: str = "git"):
        self.cwd = Path(cwd)
        self.git = git

    # --------------------------------------------------------------------- #
    # Core plumbing
    # --------------------------------------------------------------------- #
    def _git(self, *args: str) -> GitRunResult:
        """
        Run `git <args...>` in `cwd`, capturing output.

        Raises
        ------
        OSError
            If the executable cannot be launched (missing binary, bad cwd).
        """
        log.debug("git %s (cwd=%s)", " ".join(args), self.cwd)
        res = subprocess.run(
            [self.git, *args],
            cwd=self.cwd,
            capture_output=True,
            text=True,
            errors="replace",  # git echoes raw pathspecs, which need not be UTF-8
            check=False,
        )
        out = (res.stdout or "").strip()
        err = (res.stderr or "").strip()
        if res.returncode != 0:
            log.debug("git returned rc=%s | stdout=%r | stderr=%r", res.returncode, out, err)
        return GitRunResult(ok=res.returncode == 0, code=res.returncode, out=out, err=err)

    # --------------------------------------------------------------------- #
    # VcsBackend
    # --------------------------------------------------------------------- #
    def is_tracked(self, path: Path) -> Optional[bool]:
        """
        `git ls-files --error-unmatch <path>`: exit 0 means tracked.

        Any non‑zero exit (untracked, outside a repository) counts as untracked;
        only a failure to launch git makes the answer unknown.
        """
        try:
            res = self._git("ls-files", "--error-unmatch", "--", str(path))
        except OSError as exc:
            log.warning("Unable to run git to query tracking state of %s: %s", path, exc)
            return None
        log.info("Tracking state of %s: %s", path, "tracked" if res.ok else "untracked")
        return res.ok

    def stage_interactive(self, path: Path) -> None:
        """
        Run `git add --patch <path>` attached to the operator's terminal.

        Raises
        ------
        GitCommandError
            If git cannot be launched or exits non‑zero.
        """
        cmd = [self.git, "add", "--patch", "--", str(path)]
        log.debug("git add --patch %s (cwd=%s)", path, self.cwd)
        try:
            res = subprocess.run(cmd, cwd=self.cwd, check=False)
        except OSError as exc:
            raise GitCommandError(f"Failed to run git add --patch: {exc}") from exc
        if res.returncode != 0:
            raise GitCommandError(f"git add --patch failed (rc={res.returncode})")
        log.info("Interactive staging finished for %s", path)


__all__ = ["VcsBackend", "GitRunResult", "GitOps"]
