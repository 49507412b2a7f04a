"""
shiftinclude supports command.

SUMMARY: Check whether a renderer is supported by this preprocessor

mdBook calls this before running the preprocessor. Support is signalled
through the exit code alone.
"""

from __future__ import annotations

import argparse

from shiftinclude.core.preprocessor import ShiftInclude

SUMMARY = "Check whether a renderer is supported by this preprocessor"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("renderer", help="Renderer name (e.g., 'html')")


def main(args: argparse.Namespace) -> int:
    """Exit with 0 when the renderer is supported, 1 otherwise."""
    return 0 if ShiftInclude.supports_renderer(args.renderer) else 1
