"""Shared utilities for shiftinclude."""
from __future__ import annotations

from .io import PathLike, read_text, read_yaml
from .merge import deep_merge

__all__ = ["PathLike", "read_text", "read_yaml", "deep_merge"]
