"""Recursive resolution of include directives.

Directives are replaced left to right. Included content is scanned again for
directives, relative to the included file's directory, up to ``max_depth``
levels. A directive that cannot be resolved is logged and left in the output
verbatim; no failure aborts the whole text block.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterator, Optional, Tuple

from shiftinclude.core.exceptions import IncludeReadError
from shiftinclude.core.utils.io import PathLike, read_text

from .directives import Escaped, Include, Occurrence, find_directives
from .extractors import take_anchored_lines, take_lines
from .report import IncludeReport
from .selectors import Anchor
from .shift import Shift

logger = logging.getLogger(__name__)

MAX_LINK_NESTED_DEPTH = 10

Reader = Callable[[Path], str]


def _iter_causes(exc: BaseException) -> Iterator[BaseException]:
    seen = {id(exc)}
    cause = exc.__cause__ or exc.__context__
    while cause is not None and id(cause) not in seen:
        seen.add(id(cause))
        yield cause
        cause = cause.__cause__ or cause.__context__


class IncludeResolver:
    """Resolve ``{{#include}}`` directives in text blocks.

    Args:
        shift: Shift applied to every include found
        max_depth: Maximum nesting of includes before expansion stops
        reader: Callable reading a file as text, raising OSError on failure
    """

    def __init__(
        self,
        shift: Shift = Shift(),
        max_depth: int = MAX_LINK_NESTED_DEPTH,
        reader: Reader = read_text,
    ) -> None:
        self.shift = shift
        self.max_depth = max_depth
        self.reader = reader

    def render(
        self,
        occurrence: Occurrence,
        base: Path,
        report: Optional[IncludeReport] = None,
    ) -> str:
        """Render a single directive relative to ``base``.

        Shift warnings are recorded on ``report`` when one is given.

        Raises:
            IncludeReadError: If the included file cannot be read
        """
        directive = occurrence.directive
        if isinstance(directive, Escaped):
            # Omit the escape character.
            return occurrence.text[1:]

        target = base / directive.path
        try:
            content = self.reader(target)
        except (OSError, UnicodeDecodeError) as exc:
            raise IncludeReadError(
                f"Could not read file for link {occurrence.text} ({target})",
                context={"link": occurrence.text, "target": str(target)},
            ) from exc

        warnings = report.warnings if report is not None else None
        if isinstance(directive.selector, Anchor):
            return take_anchored_lines(
                content, directive.selector.name, directive.shift, warnings
            )
        return take_lines(content, directive.selector, directive.shift, warnings)

    def replace_all(
        self,
        text: str,
        base: PathLike,
        source: PathLike,
        depth: int = 0,
        report: Optional[IncludeReport] = None,
    ) -> str:
        """Replace every directive in ``text`` with its rendered content.

        Args:
            text: Text block to process
            base: Directory include paths are relative to
            source: Path of the document being processed (used in diagnostics)
            depth: Current nesting level
            report: Optional report collecting what happened

        Returns:
            The text with all resolvable directives expanded
        """
        base = Path(base)
        source = Path(source)
        # Replacements change lengths, so output is accumulated separately
        # and ``previous_end`` tracks how far ``text`` has been consumed.
        previous_end = 0
        replaced = []

        for occurrence in find_directives(text, self.shift):
            replaced.append(text[previous_end:occurrence.start])

            try:
                new_content = self.render(occurrence, base, report)
            except IncludeReadError as exc:
                logger.error('Error updating "%s", %s', occurrence.text, exc)
                for cause in _iter_causes(exc):
                    logger.warning("Caused by: %s", cause)
                if report is not None:
                    report.add_error(str(exc))
                # Resume at the directive itself so its raw text stays in the output.
                previous_end = occurrence.start
                continue

            directive = occurrence.directive
            if isinstance(directive, Include):
                if report is not None:
                    report.record_include(base / directive.path)
                if depth < self.max_depth:
                    new_content = self.replace_all(
                        new_content,
                        directive.relative_dir(base),
                        source,
                        depth + 1,
                        report,
                    )
                else:
                    message = f"Stack depth exceeded in {source}. Check for cyclic includes"
                    logger.warning(message)
                    if report is not None:
                        report.record_depth_exceeded(message)
            elif report is not None:
                report.record_escape()

            replaced.append(new_content)
            previous_end = occurrence.end

        replaced.append(text[previous_end:])
        return "".join(replaced)

    def resolve_with_report(
        self, text: str, base: PathLike, source: PathLike
    ) -> Tuple[str, IncludeReport]:
        """Resolve ``text`` and return the result together with its report."""
        report = IncludeReport(source=Path(source))
        content = self.replace_all(text, base, source, 0, report)
        return content, report


def resolve(
    text: str,
    base_dir: PathLike,
    source: PathLike,
    *,
    shift: Shift = Shift(),
    max_depth: int = MAX_LINK_NESTED_DEPTH,
    reader: Reader = read_text,
) -> str:
    """Resolve all include directives in one text block.

    Convenience wrapper around IncludeResolver for hosts that process
    documents section by section.
    """
    resolver = IncludeResolver(shift=shift, max_depth=max_depth, reader=reader)
    return resolver.replace_all(text, base_dir, source, 0)


__all__ = ["IncludeResolver", "MAX_LINK_NESTED_DEPTH", "resolve"]
