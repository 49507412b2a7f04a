"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse

from shiftinclude.core.includes.shift import Shift


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_shift_arg(parser: argparse.ArgumentParser) -> None:
    """Add --shift override for the configured shift."""
    parser.add_argument(
        "--shift",
        type=Shift.parse,
        help="Shift for included lines: none, auto, or a signed integer (negative shifts left)",
    )


def add_max_depth_arg(parser: argparse.ArgumentParser) -> None:
    """Add --max-depth override for the configured nesting limit."""
    parser.add_argument(
        "--max-depth",
        type=int,
        dest="max_depth",
        help="Maximum nesting of includes inside included files",
    )


def add_log_level_flag(parser: argparse.ArgumentParser) -> None:
    """Add --log-level flag."""
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Diagnostics level written to stderr (default: from configuration)",
    )


__all__ = [
    "add_json_flag",
    "add_log_level_flag",
    "add_max_depth_arg",
    "add_shift_arg",
]
