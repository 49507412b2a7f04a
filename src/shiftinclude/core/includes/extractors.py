"""Line extraction from included files.

Both extractors return the selected lines shifted and joined with ``\\n``.
Shift warnings are appended to ``warnings`` when a list is passed in.
"""
from __future__ import annotations

import re
from typing import List, Optional

from .selectors import LineRange
from .shift import Shift, shift_lines

ANCHOR_START = re.compile(r"ANCHOR:\s*(?P<anchor_name>[\w_-]+)")
ANCHOR_END = re.compile(r"ANCHOR_END:\s*(?P<anchor_name>[\w_-]+)")


def split_lines(text: str) -> List[str]:
    """Split ``text`` into lines on ``\\n``, dropping a trailing ``\\r`` per line.

    A final line terminator does not produce an empty last line, and other
    Unicode line boundaries are kept as line content.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def take_lines(
    text: str,
    line_range: LineRange,
    shift: Shift = Shift(),
    warnings: Optional[List[str]] = None,
) -> str:
    """Take a range of lines from ``text``, shifting all lines left or right."""
    retained = line_range.select(split_lines(text))
    return "\n".join(shift_lines(retained, shift, warnings))


def take_anchored_lines(
    text: str,
    anchor: str,
    shift: Shift = Shift(),
    warnings: Optional[List[str]] = None,
) -> str:
    """Take the lines between ``ANCHOR: anchor`` and ``ANCHOR_END: anchor``.

    Marker lines are never part of the output, including markers of other
    anchors nested inside the region. Without a matching end marker the
    region runs to the end of the file.
    """
    retained: List[str] = []
    anchor_found = False

    for line in split_lines(text):
        if anchor_found:
            end = ANCHOR_END.search(line)
            if end is not None:
                if end.group("anchor_name") == anchor:
                    break
            elif not ANCHOR_START.search(line):
                retained.append(line)
        else:
            start = ANCHOR_START.search(line)
            if start is not None and start.group("anchor_name") == anchor:
                anchor_found = True

    return "\n".join(shift_lines(retained, shift, warnings))


__all__ = ["ANCHOR_END", "ANCHOR_START", "split_lines", "take_anchored_lines", "take_lines"]
