#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
===============================================================================
GPT‑Edit ▸ Error Taxonomy
===============================================================================

Every failure in the edit pipeline is raised as a subclass of
`GptEditError` and propagates untouched to `gpt_edit.cli.main`, which logs it
and exits non‑zero. Nothing is retried or downgraded to a warning.

    GptEditError
    ├── ConfigError               – missing credentials / bad env values
    ├── FileReadError             – target file could not be read
    ├── FileWriteError            – revised content could not be written
    ├── GitCommandError           – git could not be launched or failed
    ├── RequestBuildError         – outbound request failed schema validation
    └── CompletionError
        ├── CompletionTransportError – network / HTTP / auth failure
        ├── EmptyChoicesError        – response carried no choices
        └── MissingContentError      – last choice had no text content
"""
from __future__ import annotations


class GptEditError(RuntimeError):
    """Root of all GPT‑Edit failures."""


class ConfigError(GptEditError):
    pass


class FileReadError(GptEditError):
    pass


class FileWriteError(GptEditError):
    pass


class GitCommandError(GptEditError):
    pass


class RequestBuildError(GptEditError):
    pass


class CompletionError(GptEditError):
    """Base class for failures of the chat‑completion round trip."""


class CompletionTransportError(CompletionError):
    pass


class EmptyChoicesError(CompletionError):
    pass


class MissingContentError(CompletionError):
    pass


__all__ = [
    "GptEditError",
    "ConfigError",
    "FileReadError",
    "FileWriteError",
    "GitCommandError",
    "RequestBuildError",
    "CompletionError",
    "CompletionTransportError",
    "EmptyChoicesError",
    "MissingContentError",
]
