#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
===============================================================================
GPT‑Edit ▸ Unified Logging Facility
===============================================================================

Purpose
-------
Provide one **centralised**, **idempotent** logger configuration used across the
project.  Other modules should obtain loggers via:

    from gpt_edit import get_logger

Key features
------------
* Console output on stderr – WARNING level by default so that the tool's own
  prompts and the printed request stay readable (override via env).
* Optional daily rotating file – DEBUG level, only when a log directory is
  configured. GPT‑Edit writes nothing but the target file unless asked to.
* Idempotent – root handlers are configured **once**; child loggers propagate.
* Environment overrides:
    GPT_EDIT_LOG_DIR   – enable file logging into this directory
    GPT_EDIT_LOG_LVL   – console level  (DEBUG / INFO / WARNING / … or numeric)
    GPT_EDIT_LOG_ROT   – rotation schedule ("midnight", "H", "M", …)
    GPT_EDIT_LOG_BACK  – number of backup files (default 7)
    GPT_EDIT_LOG_UTC   – truthy → timestamps & rotation in UTC (1/true/yes/on)
    GPT_EDIT_LOG_JSON  – truthy → emit JSON lines to console
"""
from __future__ import annotations

import json
import logging
import os
import time
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional

# Only the root project logger "gpt_edit" owns handlers; children propagate.
_ROOT_LOGGER_NAME = "gpt_edit"

# ════════════════════════════════════════════════════════════════════════════
# Helpers
# ════════════════════════════════════════════════════════════════════════════
def _is_truthy(val: str | None) -> bool:
    """Return True if *val* represents a truthy setting."""
    if val is None:
        return False
    return val.strip().lower() in {"1", "true", "yes", "on", "y", "t"}


def _parse_level(val: str | None, default: int = logging.WARNING) -> int:
    """
    Parse a level value which may be a name ("INFO") or an integer ("20").
    Falls back to *default* on invalid input.
    """
    if val is None:
        return default
    s = val.strip()
    if not s:
        return default
    if s.isdigit():
        return int(s)
    level = logging.getLevelName(s.upper())
    return level if isinstance(level, int) else default


def _parse_int(val: str | None, default: int) -> int:
    """Parse a non-negative integer setting; fall back to *default* on invalid input."""
    if val is None or not val.strip().isdigit():
        return default
    return int(val.strip())


# ════════════════════════════════════════════════════════════════════════════
# Defaults & environment overrides
# ════════════════════════════════════════════════════════════════════════════
_LOG_DIR_ENV = os.getenv("GPT_EDIT_LOG_DIR") or None

_CONSOLE_LEVEL_ENV = os.getenv("GPT_EDIT_LOG_LVL", "WARNING")
CONSOLE_LEVEL = _parse_level(_CONSOLE_LEVEL_ENV)
CONSOLE_LEVEL_NAME = logging.getLevelName(CONSOLE_LEVEL)

ROTATE_WHEN = os.getenv("GPT_EDIT_LOG_ROT", "midnight")
BACKUP_COUNT = _parse_int(os.getenv("GPT_EDIT_LOG_BACK"), 7)
USE_UTC = _is_truthy(os.getenv("GPT_EDIT_LOG_UTC"))
JSON_CONSOLE = _is_truthy(os.getenv("GPT_EDIT_LOG_JSON"))

# ════════════════════════════════════════════════════════════════════════════
# Formatters
# ════════════════════════════════════════════════════════════════════════════
FORMAT = "%(asctime)s | %(name)s | %(levelname)-8s | %(message)s"
DTFMT = "%Y-%m-%d %H:%M:%S"


class _JsonFormatter(logging.Formatter):
    """Minimal JSON formatter (useful for CI/log scraping)."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        data = {
            "ts": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(record.created))
            if USE_UTC
            else time.strftime("%Y-%m-%dT%H:%M:%S%z", time.localtime(record.created)),
            "name": record.name,
            "level": record.levelname,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data, ensure_ascii=False)


def _human_formatter() -> logging.Formatter:
    fmt = logging.Formatter(fmt=FORMAT, datefmt=DTFMT)
    if USE_UTC:
        fmt.converter = time.gmtime  # type: ignore[assignment]
    return fmt


# ════════════════════════════════════════════════════════════════════════════
# Handler utilities
# ════════════════════════════════════════════════════════════════════════════
def _make_file_handler(log_dir: Path) -> TimedRotatingFileHandler:
    """
    Create a rotating file handler inside *log_dir*.

    Raises OSError if the directory or file cannot be created; the caller
    reports it once the console handler is in place.
    """
    log_dir = log_dir.expanduser().resolve()
    log_dir.mkdir(parents=True, exist_ok=True)
    fh = TimedRotatingFileHandler(
        filename=log_dir / "gpt_edit.log",
        when=ROTATE_WHEN,
        interval=1,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
        utc=USE_UTC,
    )
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(_human_formatter())
    return fh


def _make_console_handler() -> logging.Handler:
    """
    Create a stderr handler using either JSON or human formatter.
    """
    ch = logging.StreamHandler()
    ch.setLevel(CONSOLE_LEVEL)
    ch.setFormatter(_JsonFormatter() if JSON_CONSOLE else _human_formatter())
    return ch


# ════════════════════════════════════════════════════════════════════════════
# Public helper
# ════════════════════════════════════════════════════════════════════════════
def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return a configured `logging.Logger`.

    Parameters
    ----------
    name : str | None
        • Explicit logger name, e.g. __name__ from caller.
        • *None* → root project logger "gpt_edit".

    Notes
    -----
    Handlers are attached **only to the root** "gpt_edit" logger. Child loggers
    are returned without handlers and **propagate** to the root, avoiding duplicate
    console/file outputs across modules.
    """
    root = logging.getLogger(_ROOT_LOGGER_NAME)

    if not root.handlers:
        root.setLevel(logging.DEBUG)

        file_error: Optional[OSError] = None
        if _LOG_DIR_ENV:
            try:
                root.addHandler(_make_file_handler(Path(_LOG_DIR_ENV)))
            except OSError as exc:
                file_error = exc

        root.addHandler(_make_console_handler())
        root.propagate = False

        if file_error is not None:
            root.warning("File logging disabled, cannot write to %s: %s", _LOG_DIR_ENV, file_error)

        root.debug(
            "Logger initialised | dir=%s | console=%s | rotate=%s | backups=%s | utc=%s | json-console=%s",
            _LOG_DIR_ENV or "<console only>",
            CONSOLE_LEVEL_NAME,
            ROTATE_WHEN,
            BACKUP_COUNT,
            USE_UTC,
            JSON_CONSOLE,
        )

    if name is None or name == _ROOT_LOGGER_NAME:
        return root

    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    logger.propagate = True
    return logger


__all__ = ["get_logger"]
