"""Configuration for shiftinclude.

- ConfigManager: merges bundled defaults, the book table and environment
- IncludeConfig: typed accessors for the merged settings
"""
from __future__ import annotations

from .manager import ConfigManager, ENV_PREFIX
from .domain import IncludeConfig

__all__ = ["ConfigManager", "ENV_PREFIX", "IncludeConfig"]
