"""The shiftinclude mdBook preprocessor.

Acts like mdBook's own ``{{#include}}`` but shifts the included lines as
configured in ``[preprocessor.shiftinclude]``.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from .book import PreprocessorContext, chapter_path, iter_chapters
from .config import IncludeConfig
from .includes import IncludeResolver

logger = logging.getLogger(__name__)

# mdBook minor version this preprocessor's JSON handling follows.
SUPPORTED_MDBOOK_VERSION = "0.4"


def _major_minor(version: str) -> str:
    return ".".join(version.lstrip("v").split(".")[:2])


class ShiftInclude:
    """A preprocessor that acts like ``{{#include}}`` but allows shifting."""

    NAME = "shiftinclude"

    def __init__(
        self,
        ctx: Optional[PreprocessorContext] = None,
        *,
        config: Optional[IncludeConfig] = None,
    ) -> None:
        if ctx is not None and ctx.mdbook_version:
            if _major_minor(ctx.mdbook_version) != SUPPORTED_MDBOOK_VERSION:
                logger.warning(
                    "The %s plugin supports mdbook %s, but we're being called from version %s",
                    self.NAME,
                    SUPPORTED_MDBOOK_VERSION,
                    ctx.mdbook_version,
                )
        if config is None:
            config = IncludeConfig(ctx.preprocessor_config(self.NAME) if ctx is not None else None)
        self.config = config
        self.resolver = IncludeResolver(shift=config.shift, max_depth=config.max_depth)

    @property
    def name(self) -> str:
        return self.NAME

    @staticmethod
    def supports_renderer(renderer: str) -> bool:
        """Indicate whether a renderer is supported.

        This preprocessor emits Markdown, so it supports almost any renderer.
        """
        return renderer != "not-supported"

    def run(self, ctx: PreprocessorContext, book: Dict[str, Any]) -> Dict[str, Any]:
        """Expand include directives in every chapter of ``book`` in place."""
        src_dir = ctx.src_dir
        for chapter in iter_chapters(book):
            path = chapter_path(chapter)
            if path is None:
                continue
            base = src_dir / path.parent
            chapter["content"] = self.resolver.replace_all(
                chapter.get("content") or "", base, path, 0
            )
        return book


__all__ = ["ShiftInclude", "SUPPORTED_MDBOOK_VERSION"]
