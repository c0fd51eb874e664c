#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
===============================================================================
GPT‑Edit ▸ OpenAI Chat Completions Client
===============================================================================

Purpose
-------
One round trip to the Chat Completions API per run:

  • build a single user message (instruction + prompt + original file),
  • print the serialized request to stdout so the operator sees exactly
    what is sent,
  • call `client.chat.completions.create(...)` once (no streaming, tools,
    system message or history),
  • return the text of the **last** choice.

Any client object exposing `chat.completions.create(**kwargs)` works, which
lets tests inject an offline fake. `create_client(config)` builds the real
`openai.OpenAI` instance from an explicit `EditConfig`.

Failure modes
-------------
* SDK / network / HTTP / auth errors → `CompletionTransportError`
* `choices` empty                     → `EmptyChoicesError`
* last choice has no `message.content` → `MissingContentError`
* stdout cannot encode the request     → `RequestBuildError` (nothing sent)
"""
from __future__ import annotations

import json
import sys
from typing import Any, Dict, Optional, TextIO

from gpt_edit import get_logger
from gpt_edit.config import EditConfig
from gpt_edit.errors import (
    CompletionTransportError,
    ConfigError,
    EmptyChoicesError,
    MissingContentError,
    RequestBuildError,
)
from gpt_edit.prompts import build_edit_prompt
from gpt_edit.request_validator import validate_request

log = get_logger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# SDK bootstrap
# ─────────────────────────────────────────────────────────────────────────────
def create_client(config: EditConfig) -> Any:
    """
    Import and instantiate the official OpenAI client.

    Raises
    ------
    ConfigError
        If no API key is configured.
    """
    if not config.api_key:
        raise ConfigError(
            "No API key configured. Set GPT_EDIT_API_KEY or OPENAI_API_KEY."
        )

    try:
        from openai import OpenAI  # type: ignore
    except ImportError:  # pragma: no cover
        log.error("OpenAI SDK not installed. Run: pip install 'openai>=1.0.0'")
        raise

    sdk = OpenAI(
        api_key=config.api_key,
        base_url=config.base_url,
        organization=config.organization,
    )
    log.info("OpenAI client initialised | base=%s", config.base_url or "<default>")
    return sdk


# ─────────────────────────────────────────────────────────────────────────────
# Request / response
# ─────────────────────────────────────────────────────────────────────────────
def build_chat_request(original_text: str, prompt: str, model: str) -> Dict[str, Any]:
    """
    Compose the single‑message chat request and validate its shape.
    """
    request = {
        "model": model,
        "messages": [
            {"role": "user", "content": build_edit_prompt(prompt, original_text)},
        ],
    }
    return validate_request(request)


def _extract_content(response: Any) -> str:
    choices = list(getattr(response, "choices", None) or [])
    if not choices:
        raise EmptyChoicesError("No choices in response")

    # The last candidate is the one we keep.
    choice = choices[-1]
    message = getattr(choice, "message", None)
    content = getattr(message, "content", None)
    if content is None:
        raise MissingContentError("No content in choice")
    return content


def request_edit(
    original_text: str,
    prompt: str,
    model: str,
    *,
    client: Any,
    api_timeout: Optional[float] = None,
    out: TextIO | None = None,
) -> str:
    """
    Ask the model for the revised file contents.

    Parameters
    ----------
    original_text : str
        Current file contents.
    prompt : str
        Operator's instruction.
    model : str
        Model id, e.g. "gpt-4o-mini".
    client : Any
        Object exposing `chat.completions.create(**kwargs)`.
    api_timeout : float | None
        Passed through as `timeout` only when set.
    out : TextIO | None
        Stream receiving the serialized request (default: stdout).

    Returns
    -------
    str
        Text content of the last returned choice.
    """
    request = build_chat_request(original_text, prompt, model)

    stream = out if out is not None else sys.stdout
    try:
        print(json.dumps(request, ensure_ascii=False), file=stream)
        stream.flush()
    except UnicodeEncodeError as exc:
        raise RequestBuildError(
            f"Cannot print the request: output encoding {getattr(stream, 'encoding', None)!r} "
            f"cannot represent it ({exc.reason}). Set PYTHONIOENCODING=utf-8."
        ) from exc

    kwargs: Dict[str, Any] = dict(request)
    if api_timeout is not None:
        kwargs["timeout"] = api_timeout

    log.info("Requesting edit | model=%s | original=%d chars", model, len(original_text))
    try:
        response = client.chat.completions.create(**kwargs)
    except Exception as exc:
        log.debug("Chat completion request failed", exc_info=True)
        raise CompletionTransportError(f"Chat completion request failed: {exc}") from exc

    content = _extract_content(response)
    log.info("Received revised content (%d chars)", len(content))
    return content


__all__ = ["create_client", "build_chat_request", "request_edit"]
