"""Stdlib logging setup for the command line.

Diagnostics always go to stderr: when running as an mdBook preprocessor,
stdout carries the processed book JSON.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

_SHIFTINCLUDE_HANDLER: logging.Handler | None = None

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _level_from_name(name: str) -> int:
    level = getattr(logging, str(name).upper(), None)
    if isinstance(level, int):
        return level
    return logging.INFO


def configure_stdlib_logging(*, level: str = "WARNING", stream: Optional[TextIO] = None) -> None:
    """Configure Python stdlib logging to write to ``stream`` (stderr by default).

    Idempotent per-process: the handler installed by a previous call is
    replaced, other handlers are left alone.
    """
    global _SHIFTINCLUDE_HANDLER

    root = logging.getLogger()
    root.setLevel(_level_from_name(level))

    if _SHIFTINCLUDE_HANDLER is not None:
        root.removeHandler(_SHIFTINCLUDE_HANDLER)
        _SHIFTINCLUDE_HANDLER.close()
        _SHIFTINCLUDE_HANDLER = None

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    _SHIFTINCLUDE_HANDLER = handler


def reset_stdlib_logging_for_tests() -> None:
    """Test-only: remove the handler installed by configure_stdlib_logging."""
    global _SHIFTINCLUDE_HANDLER
    if _SHIFTINCLUDE_HANDLER is not None:
        logging.getLogger().removeHandler(_SHIFTINCLUDE_HANDLER)
        _SHIFTINCLUDE_HANDLER.close()
    _SHIFTINCLUDE_HANDLER = None


__all__ = ["configure_stdlib_logging", "reset_stdlib_logging_for_tests"]
