"""
shiftinclude preprocess command.

SUMMARY: Expand includes in a book read from stdin (default command)

Reads the ``[context, book]`` JSON pair mdBook writes to stdin, expands every
chapter and writes the processed book JSON to stdout.
"""

from __future__ import annotations

import argparse
import sys

from shiftinclude.core.book import dump_book, load_input
from shiftinclude.core.config import IncludeConfig
from shiftinclude.core.logging import configure_stdlib_logging
from shiftinclude.core.preprocessor import ShiftInclude

SUMMARY = "Expand includes in a book read from stdin (default command)"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    # mdBook passes no arguments; the book arrives on stdin.


def main(args: argparse.Namespace) -> int:
    """Run the preprocessor over stdin and write the result to stdout."""
    ctx, book = load_input(sys.stdin)
    config = IncludeConfig(ctx.preprocessor_config(ShiftInclude.NAME))
    if not getattr(args, "log_level", None):
        configure_stdlib_logging(level=config.log_level)

    preprocessor = ShiftInclude(ctx, config=config)
    processed = preprocessor.run(ctx, book)
    dump_book(processed, sys.stdout)
    return 0
