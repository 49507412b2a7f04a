"""Typed accessor for include settings.

IncludeConfig is the only way the preprocessor and CLI read settings, so key
names and defaults live in one place.
"""
from __future__ import annotations

from functools import cached_property
from typing import Any, Dict, Mapping, Optional

from shiftinclude.core.includes.resolver import MAX_LINK_NESTED_DEPTH
from shiftinclude.core.includes.shift import Shift

from .manager import ConfigManager


class IncludeConfig:
    """Settings for include resolution.

    Usage:
        cfg = IncludeConfig(book_config={"shift": "auto"})
        resolver = IncludeResolver(shift=cfg.shift, max_depth=cfg.max_depth)
    """

    def __init__(
        self,
        book_config: Optional[Mapping[str, Any]] = None,
        *,
        environ: Optional[Mapping[str, str]] = None,
        validate: bool = True,
    ) -> None:
        self._config = ConfigManager(book_config, environ=environ).load_config(validate=validate)

    @property
    def section(self) -> Dict[str, Any]:
        return self._config

    @cached_property
    def shift(self) -> Shift:
        return Shift.parse(self._config.get("shift"))

    @cached_property
    def max_depth(self) -> int:
        value = self._config.get("max_depth")
        return MAX_LINK_NESTED_DEPTH if value is None else int(value)

    @cached_property
    def log_level(self) -> str:
        return str(self._config.get("log_level") or "WARNING").upper()


__all__ = ["IncludeConfig"]
