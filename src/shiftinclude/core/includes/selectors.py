"""Line selectors for include directives.

The part after the path in ``{{#include path:selector}}`` chooses which lines
of the target file are included:

- ``path``            whole file
- ``path:N``          line N only (1-based)
- ``path:N:``         from line N to the end
- ``path::M``         from the start up to line M
- ``path:N:M``        lines N up to M
- ``path:name``       the region between ``ANCHOR: name`` and ``ANCHOR_END: name``

Parsing never fails; malformed selectors fall back to permissive ranges.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Union


@dataclass(frozen=True)
class LineRange:
    """Base class for the four range shapes. Bounds are 0-based, end exclusive."""

    def start_bound(self) -> Optional[int]:
        """Inclusive start index, or None when unbounded."""
        return None

    def end_bound(self) -> Optional[int]:
        """Exclusive end index, or None when unbounded."""
        return None

    def select(self, lines: Sequence[str]) -> List[str]:
        """Return the lines covered by this range.

        A start past the end (or past the last line) selects nothing.
        """
        start = self.start_bound() or 0
        end = self.end_bound()
        if end is None:
            return list(lines[start:])
        if end <= start:
            return []
        return list(lines[start:end])


@dataclass(frozen=True)
class Range(LineRange):
    start: int
    end: int

    def start_bound(self) -> Optional[int]:
        return self.start

    def end_bound(self) -> Optional[int]:
        return self.end


@dataclass(frozen=True)
class RangeFrom(LineRange):
    start: int

    def start_bound(self) -> Optional[int]:
        return self.start


@dataclass(frozen=True)
class RangeTo(LineRange):
    end: int

    def end_bound(self) -> Optional[int]:
        return self.end


@dataclass(frozen=True)
class RangeFull(LineRange):
    pass


@dataclass(frozen=True)
class Anchor:
    """Named region delimited by ANCHOR / ANCHOR_END markers."""
    name: str


Selector = Union[LineRange, Anchor]


def _parse_index(value: str) -> Optional[int]:
    # Only plain non-negative integers count; "-5" or "5.7" are not line numbers.
    if value.isascii() and value.isdigit():
        return int(value)
    return None


def parse_selector(rest: Optional[str]) -> Selector:
    """Parse the text following the first colon of an include path.

    Args:
        rest: Selector text, or None when the path had no colon

    Returns:
        A LineRange variant or an Anchor
    """
    parts = (rest or "").split(":", 1)

    first = parts[0]
    start: Optional[int]
    number = _parse_index(first)
    if number is not None:
        # Line numbers are 1-based. Line 0 is accepted and treated as line 1.
        start = max(number - 1, 0)
    elif first == "":
        start = None
    else:
        return Anchor(first)

    end_text = parts[1] if len(parts) > 1 else None
    # Only three colon-delimited fields are considered: path, start, end.
    if end_text is not None:
        end_text = end_text.split(":", 1)[0]
    end = _parse_index(end_text) if end_text is not None else None

    if start is not None:
        if end_text is None:
            return Range(start, start + 1)
        if end is None:
            return RangeFrom(start)
        return Range(start, end)
    if end is not None:
        return RangeTo(end)
    return RangeFull()


__all__ = [
    "Anchor",
    "LineRange",
    "Range",
    "RangeFrom",
    "RangeFull",
    "RangeTo",
    "Selector",
    "parse_selector",
]
