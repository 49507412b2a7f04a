"""mdBook preprocessor input and book traversal.

mdBook invokes a preprocessor with a JSON array ``[context, book]`` on stdin
and expects the processed book as JSON on stdout. Books are kept as plain
dicts so that fields this package does not know about round-trip unchanged.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, TextIO, Tuple

from shiftinclude.core.exceptions import PreprocessorInputError


@dataclass
class PreprocessorContext:
    """Context mdBook passes to every preprocessor."""

    root: Path
    config: Dict[str, Any] = field(default_factory=dict)
    renderer: str = "html"
    mdbook_version: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PreprocessorContext":
        return cls(
            root=Path(data.get("root") or "."),
            config=dict(data.get("config") or {}),
            renderer=str(data.get("renderer") or "html"),
            mdbook_version=str(data.get("mdbook_version") or ""),
        )

    @property
    def src_dir(self) -> Path:
        """Directory holding the book's markdown sources."""
        book = self.config.get("book") or {}
        return self.root / (book.get("src") or "src")

    def preprocessor_config(self, name: str) -> Dict[str, Any]:
        """Return the ``[preprocessor.<name>]`` table, or an empty dict."""
        tables = self.config.get("preprocessor") or {}
        table = tables.get(name) or {}
        return dict(table) if isinstance(table, dict) else {}


def load_input(stream: TextIO) -> Tuple[PreprocessorContext, Dict[str, Any]]:
    """Parse the ``[context, book]`` pair mdBook writes to stdin.

    Raises:
        PreprocessorInputError: If the input is not valid preprocessor JSON
    """
    try:
        payload = json.load(stream)
    except json.JSONDecodeError as exc:
        raise PreprocessorInputError(f"Unable to parse the input: {exc}") from exc

    if not isinstance(payload, list) or len(payload) != 2:
        raise PreprocessorInputError("Expected a JSON array of [context, book]")
    ctx, book = payload
    if not isinstance(ctx, dict) or not isinstance(book, dict):
        raise PreprocessorInputError("Context and book must both be JSON objects")
    return PreprocessorContext.from_dict(ctx), book


def dump_book(book: Dict[str, Any], stream: TextIO) -> None:
    json.dump(book, stream)


def _items(book_or_chapter: Dict[str, Any], key: str) -> List[Any]:
    items = book_or_chapter.get(key) or []
    return items if isinstance(items, list) else []


def _walk(items: List[Any]) -> Iterator[Dict[str, Any]]:
    for item in items:
        # Separators are plain strings, part titles are {"PartTitle": "..."}.
        if not isinstance(item, dict):
            continue
        chapter = item.get("Chapter")
        if not isinstance(chapter, dict):
            continue
        yield chapter
        yield from _walk(_items(chapter, "sub_items"))


def iter_chapters(book: Dict[str, Any]) -> Iterator[Dict[str, Any]]:
    """Yield every chapter of ``book`` depth-first, nested chapters included."""
    # mdBook has used both "sections" and "items" for the top-level list.
    yield from _walk(_items(book, "sections") or _items(book, "items"))


def chapter_path(chapter: Dict[str, Any]) -> Optional[Path]:
    """Path of a chapter relative to the source dir, None for draft chapters."""
    path = chapter.get("path")
    return Path(path) if path else None


__all__ = [
    "PreprocessorContext",
    "chapter_path",
    "dump_book",
    "iter_chapters",
    "load_input",
]
