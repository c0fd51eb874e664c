#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
===============================================================================
GPT‑Edit ▸ Runtime Configuration
===============================================================================

All ambient process state the pipeline depends on (credentials, endpoint,
working directory) is resolved **once** here and passed explicitly into the
pipeline. Nothing below `gpt_edit.cli` reads `os.environ` on its own.

Environment variables
---------------------
GPT_EDIT_API_KEY | OPENAI_API_KEY                      – API key
GPT_EDIT_BASE_URL | OPENAI_BASE_URL | OPENAI_API_BASE  – OpenAI‑compatible base
GPT_EDIT_ORG_ID | OPENAI_ORG_ID | OPENAI_ORGANIZATION  – organisation (optional)
GPT_EDIT_API_TIMEOUT                                   – request timeout in seconds
                                                         (unset → SDK default)
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping, Optional, Sequence

from gpt_edit.errors import ConfigError

_API_KEY_VARS: Sequence[str] = ("GPT_EDIT_API_KEY", "OPENAI_API_KEY")
_BASE_URL_VARS: Sequence[str] = ("GPT_EDIT_BASE_URL", "OPENAI_BASE_URL", "OPENAI_API_BASE")
_ORG_ID_VARS: Sequence[str] = ("GPT_EDIT_ORG_ID", "OPENAI_ORG_ID", "OPENAI_ORGANIZATION")
_TIMEOUT_VAR = "GPT_EDIT_API_TIMEOUT"


def _first_env(environ: Mapping[str, str], names: Iterable[str]) -> str | None:
    for name in names:
        val = environ.get(name)
        if val:
            return val
    return None


def _parse_timeout(raw: str | None) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigError(f"{_TIMEOUT_VAR} must be a number of seconds, got {raw!r}") from exc
    if value <= 0:
        raise ConfigError(f"{_TIMEOUT_VAR} must be positive, got {raw!r}")
    return value


@dataclass(frozen=True)
class EditConfig:
    """
    Explicit configuration for one GPT‑Edit run.

    Attributes
    ----------
    api_key : str | None
        Credential for the completion service. Checked when the client is built.
    base_url : str | None
        Optional OpenAI‑compatible endpoint.
    organization : str | None
        Optional organisation identifier.
    api_timeout : float | None
        Per‑request timeout; None leaves the SDK's transport default in place.
    cwd : Path
        Working directory for git subprocesses.
    """

    api_key: Optional[str] = None
    base_url: Optional[str] = None
    organization: Optional[str] = None
    api_timeout: Optional[float] = None
    cwd: Path = Path(".")

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        cwd: Path | None = None,
    ) -> "EditConfig":
        env = os.environ if environ is None else environ
        return cls(
            api_key=_first_env(env, _API_KEY_VARS),
            base_url=_first_env(env, _BASE_URL_VARS),
            organization=_first_env(env, _ORG_ID_VARS),
            api_timeout=_parse_timeout(env.get(_TIMEOUT_VAR)),
            cwd=Path.cwd() if cwd is None else Path(cwd),
        )


__all__ = ["EditConfig"]
