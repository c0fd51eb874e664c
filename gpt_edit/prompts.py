#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
===============================================================================
GPT‑Edit ▸ Prompt Builder
===============================================================================

The whole conversation is one user message: a fixed instruction, the
operator's prompt, then the original file verbatim. The model is told to
answer with the complete revised file and nothing else, because its reply is
written to disk as‑is.
"""
from __future__ import annotations

from gpt_edit import get_logger

log = get_logger(__name__)

EDIT_INSTRUCTION = (
    "You are used within a CLI tool, you accept a prompt and file contents from the user. "
    "Generate new file contents based on the instructions in the prompt. "
    "Return only the revised file contents. DO NOT WRAP CODE IN BACKTICKS."
)


def build_edit_prompt(prompt: str, original_text: str) -> str:
    """Embed *prompt* and *original_text* in the edit instruction template."""
    content = f"{EDIT_INSTRUCTION}\n\nPrompt:\n{prompt}\n\nOriginal file:\n{original_text}\n"
    log.debug(
        "Edit prompt built | prompt=%d chars | original=%d chars | total=%d chars",
        len(prompt),
        len(original_text),
        len(content),
    )
    return content


__all__ = ["EDIT_INSTRUCTION", "build_edit_prompt"]
