#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
===============================================================================
GPT‑Edit ▸ JSON‑Schema Request Validator
===============================================================================

Purpose
-------
Check the outbound chat‑completion request against the schema bundled at
`gpt_edit/request_schema.json` before it is printed or sent: one model id and
exactly one user message, nothing else.

Public API
----------
* `validate_request(payload: dict) -> dict`
    - Returns *payload* unchanged on success
    - Raises `gpt_edit.errors.RequestBuildError` on schema violations

Design notes
------------
* The schema is loaded **once** at import time via `importlib.resources`.
* We compile a `Draft7Validator` and report the first error by path, so the
  message points at the offending field.
"""
from __future__ import annotations

import json
from importlib import resources
from typing import Any, Dict

from jsonschema import Draft7Validator, ValidationError

from gpt_edit import get_logger
from gpt_edit.errors import RequestBuildError

log = get_logger(__name__)


def _load_schema() -> Dict[str, Any]:
    """
    Load the bundled schema from the installed package.

    Raises
    ------
    RequestBuildError
        If the schema is missing or not valid JSON (broken install).
    """
    try:
        with resources.files("gpt_edit").joinpath("request_schema.json").open(
            encoding="utf-8"
        ) as fh:
            return json.load(fh)
    except (OSError, json.JSONDecodeError) as exc:  # pragma: no cover
        log.critical("request_schema.json could not be loaded: %s", exc)
        raise RequestBuildError(f"Bundled request schema unavailable: {exc}") from exc


_SCHEMA: Dict[str, Any] = _load_schema()
Draft7Validator.check_schema(_SCHEMA)
_VALIDATOR: Draft7Validator = Draft7Validator(_SCHEMA)


def _pretty_pointer(exc: ValidationError) -> str:
    """
    Human‑friendly location of the failing field (JSON Pointer‑ish).
    """
    parts = ["$"]
    parts.extend(str(p) for p in exc.path)
    return ".".join(parts)


def validate_request(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate a chat request payload.

    Parameters
    ----------
    payload : dict
        `{"model": ..., "messages": [{"role": "user", "content": ...}]}`

    Returns
    -------
    dict
        The same payload, for call chaining.

    Raises
    ------
    RequestBuildError
        On the first schema violation (ordered by path for stable messages).
    """
    errors = sorted(_VALIDATOR.iter_errors(payload), key=lambda e: [str(p) for p in e.path])
    if errors:
        first = errors[0]
        where = _pretty_pointer(first)
        log.error("Invalid chat request at %s: %s", where, first.message)
        raise RequestBuildError(f"Invalid chat request at {where}: {first.message}")
    log.debug("Chat request passed schema validation")
    return payload


__all__ = ["validate_request"]
