"""Indentation shifting for included lines.

A shift is applied after lines have been extracted from the target file:
- NONE:  lines are passed through unchanged
- RIGHT: ``n`` spaces are prepended to every line (empty lines included)
- LEFT:  the first ``n`` characters of every line are dropped
- AUTO:  whitespace common to all non-empty lines is dropped
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Union

logger = logging.getLogger(__name__)


class ShiftMode(Enum):
    """Kind of indentation change applied to included lines."""
    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    AUTO = "auto"


@dataclass(frozen=True)
class Shift:
    """Indication of whether (and how far) to shift included text."""

    mode: ShiftMode = ShiftMode.NONE
    amount: int = 0

    @classmethod
    def none(cls) -> "Shift":
        return cls(ShiftMode.NONE)

    @classmethod
    def left(cls, amount: int) -> "Shift":
        return cls(ShiftMode.LEFT, amount)

    @classmethod
    def right(cls, amount: int) -> "Shift":
        return cls(ShiftMode.RIGHT, amount)

    @classmethod
    def auto(cls) -> "Shift":
        return cls(ShiftMode.AUTO)

    @classmethod
    def parse(cls, value: Union[str, int, None]) -> "Shift":
        """Build a shift from a configuration value.

        Accepts ``none``, ``auto`` or a signed integer (also as a string).
        Positive values shift right, negative values shift left.

        Raises:
            ValueError: If the value cannot be interpreted as a shift
        """
        if value is None:
            return cls.none()
        if isinstance(value, bool):
            raise ValueError(f"Invalid shift value: {value!r}")
        if isinstance(value, int):
            amount = value
        else:
            text = str(value).strip().lower()
            if text in ("", "none"):
                return cls.none()
            if text == "auto":
                return cls.auto()
            try:
                amount = int(text)
            except ValueError as exc:
                raise ValueError(f"Invalid shift value: {value!r}") from exc
        if amount > 0:
            return cls.right(amount)
        if amount < 0:
            return cls.left(-amount)
        return cls.none()

    def resolve(self, lines: Sequence[str]) -> "Shift":
        """Turn AUTO into a concrete LEFT shift for ``lines``."""
        if self.mode is ShiftMode.AUTO:
            return Shift.left(len(common_leading_ws(lines)))
        return self

    def __str__(self) -> str:
        if self.mode in (ShiftMode.LEFT, ShiftMode.RIGHT):
            return f"{self.mode.value}({self.amount})"
        return self.mode.value


def common_leading_ws(lines: Sequence[str]) -> str:
    """Return the leading whitespace shared by all non-empty ``lines``."""
    common: str | None = None
    for line in lines:
        # Empty lines do not take part in the calculation.
        if not line:
            continue
        ws = _leading_ws(line)
        if common is None:
            common = ws
            continue
        size = 0
        for a, b in zip(common, ws):
            if a != b:
                break
            size += 1
        common = common[:size]
    return common or ""


def _leading_ws(line: str) -> str:
    for index, char in enumerate(line):
        if not char.isspace():
            return line[:index]
    return line


def shift_line(line: str, shift: Shift, warnings: Optional[List[str]] = None) -> str:
    """Apply an explicit (non-AUTO) shift to a single line.

    Removing non-whitespace is logged and, when ``warnings`` is given,
    appended to it as well.
    """
    if shift.mode is ShiftMode.RIGHT:
        return " " * shift.amount + line
    if shift.mode is ShiftMode.LEFT:
        removed = line[: shift.amount]
        if any(not c.isspace() for c in removed):
            message = f"left-shifting away non-whitespace: {removed!r}"
            logger.warning(message)
            if warnings is not None:
                warnings.append(message)
        return line[shift.amount:]
    return line


def shift_lines(
    lines: Sequence[str], shift: Shift, warnings: Optional[List[str]] = None
) -> List[str]:
    """Shift every line in ``lines``; AUTO is computed from these lines only."""
    explicit = shift.resolve(lines)
    return [shift_line(line, explicit, warnings) for line in lines]


__all__ = ["Shift", "ShiftMode", "common_leading_ws", "shift_line", "shift_lines"]
