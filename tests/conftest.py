"""
===============================================================================
Shared offline fakes for GPT‑Edit tests
===============================================================================

* `FakeOpenAIClient` mimics `client.chat.completions.create(...)` and returns
  a response whose `.choices[i].message.content` are the configured strings.
* `FakeVcs` implements the `VcsBackend` protocol in memory and records calls.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest


class _Obj:
    """Simple attribute container to mimic SDK objects (choices/message)."""

    def __init__(self, **kw):
        for k, v in kw.items():
            setattr(self, k, v)


class _FakeCompletions:
    def __init__(self, contents: Optional[List[Optional[str]]], error: Exception | None):
        self._contents = contents
        self._error = error
        self.calls: List[Dict[str, Any]] = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self._error is not None:
            raise self._error
        choices = [
            _Obj(index=i, message=_Obj(role="assistant", content=c))
            for i, c in enumerate(self._contents or [])
        ]
        return _Obj(choices=choices)


class FakeOpenAIClient:
    """
    Minimal stand-in for the OpenAI client:
        client.chat.completions.create(...)
    """

    def __init__(self, contents: Optional[List[Optional[str]]] = None, error: Exception | None = None):
        self.chat = _Obj(completions=_FakeCompletions(contents, error))

    @property
    def calls(self) -> List[Dict[str, Any]]:
        return self.chat.completions.calls


class FakeVcs:
    """In-memory VcsBackend; `tracked=None` models an unavailable git."""

    def __init__(self, tracked: Optional[bool] = True, stage_error: Exception | None = None):
        self.tracked = tracked
        self.stage_error = stage_error
        self.tracked_queries: List[Path] = []
        self.staged: List[Path] = []

    def is_tracked(self, path: Path) -> Optional[bool]:
        self.tracked_queries.append(path)
        return self.tracked

    def stage_interactive(self, path: Path) -> None:
        self.staged.append(path)
        if self.stage_error is not None:
            raise self.stage_error


@pytest.fixture
def make_client():
    """Factory: make_client(["reply", ...]) or make_client(error=Exc(...))."""
    return FakeOpenAIClient


@pytest.fixture
def make_vcs():
    return FakeVcs
