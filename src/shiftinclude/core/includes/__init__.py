"""Include directive engine.

Public API:
- find_directives / parse_include_path: scan and parse directives
- take_lines / take_anchored_lines: extract selected lines
- Shift: indentation shifting of extracted lines
- IncludeResolver / resolve: recursive expansion of a text block
"""
from __future__ import annotations

from .directives import (
    Directive,
    Escaped,
    Include,
    Occurrence,
    find_directives,
    parse_include_path,
)
from .extractors import split_lines, take_anchored_lines, take_lines
from .report import IncludeReport
from .resolver import MAX_LINK_NESTED_DEPTH, IncludeResolver, resolve
from .selectors import (
    Anchor,
    LineRange,
    Range,
    RangeFrom,
    RangeFull,
    RangeTo,
    Selector,
    parse_selector,
)
from .shift import Shift, ShiftMode, common_leading_ws, shift_lines

__all__ = [
    # Directives
    "Directive",
    "Escaped",
    "Include",
    "Occurrence",
    "find_directives",
    "parse_include_path",
    # Selectors
    "Anchor",
    "LineRange",
    "Range",
    "RangeFrom",
    "RangeFull",
    "RangeTo",
    "Selector",
    "parse_selector",
    # Extraction and shifting
    "split_lines",
    "take_lines",
    "take_anchored_lines",
    "Shift",
    "ShiftMode",
    "common_leading_ws",
    "shift_lines",
    # Resolution
    "IncludeReport",
    "IncludeResolver",
    "MAX_LINK_NESTED_DEPTH",
    "resolve",
]
