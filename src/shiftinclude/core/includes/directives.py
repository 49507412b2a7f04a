"""Directive scanning for ``{{#include ...}}`` and its escaped form.

Handles:
- {{#include path}}            - Include a file (see selectors for ``path:...``)
- \\{{#anything ...}}           - Escaped directive, rendered without the backslash

Directives with any other name are not reported; they stay in the text as-is.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

from .selectors import Selector, parse_selector
from .shift import Shift

ESCAPE_CHAR = "\\"

DIRECTIVE_PATTERN = re.compile(
    r"""(?x)            # verbose mode
    \\\{\{\#.*\}\}      # escaped directive
    |                   # or
    \{\{\s*             # opening braces and whitespace
    \#([a-zA-Z0-9_]+)   # directive name
    \s+                 # separating whitespace
    ([^}]+)             # target path and space separated properties
    \}\}                # closing braces
    """
)


@dataclass(frozen=True)
class Escaped:
    """A directive written with a leading escape character."""


@dataclass(frozen=True)
class Include:
    """An include directive: file path, line selector and shift."""
    path: Path
    selector: Selector
    shift: Shift = Shift()

    def relative_dir(self, base: Path) -> Path:
        """Directory that directives inside the included file resolve against."""
        return (Path(base) / self.path).parent


Directive = Union[Escaped, Include]


@dataclass(frozen=True)
class Occurrence:
    """A directive located in a text block.

    ``start``/``end`` are half-open offsets into the scanned string and
    ``text`` is the raw matched directive.
    """
    start: int
    end: int
    directive: Directive
    text: str


def parse_include_path(token: str, shift: Shift = Shift()) -> Include:
    """Split ``path[:selector]`` into an Include directive."""
    path, sep, rest = token.partition(":")
    return Include(Path(path), parse_selector(rest if sep else None), shift)


def _directive_from_match(match: re.Match[str], shift: Shift) -> Optional[Directive]:
    name, payload = match.group(1), match.group(2)
    if name is not None and payload is not None:
        props = payload.split()
        # Only the first property is used; the rest is reserved.
        if name == "include" and props:
            return parse_include_path(props[0], shift)
        return None
    if match.group(0).startswith(ESCAPE_CHAR):
        return Escaped()
    return None


def find_directives(text: str, shift: Shift = Shift()) -> Iterator[Occurrence]:
    """Yield include and escaped directives in ``text`` from left to right.

    Args:
        text: Text block to scan
        shift: Shift attached to every Include found

    Yields:
        Occurrence for each recognised directive
    """
    for match in DIRECTIVE_PATTERN.finditer(text):
        directive = _directive_from_match(match, shift)
        if directive is not None:
            yield Occurrence(
                start=match.start(),
                end=match.end(),
                directive=directive,
                text=match.group(0),
            )


__all__ = [
    "DIRECTIVE_PATTERN",
    "Directive",
    "ESCAPE_CHAR",
    "Escaped",
    "Include",
    "Occurrence",
    "find_directives",
    "parse_include_path",
]
