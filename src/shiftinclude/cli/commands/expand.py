"""
shiftinclude expand command.

SUMMARY: Expand include directives in a single file

Includes are resolved relative to the file's own directory. The result is
printed to stdout, or written to --output.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from shiftinclude.cli import OutputFormatter, add_json_flag, add_max_depth_arg, add_shift_arg
from shiftinclude.core.config import IncludeConfig
from shiftinclude.core.exceptions import IncludeReadError, ShiftIncludeError
from shiftinclude.core.includes import IncludeResolver
from shiftinclude.core.utils.io import read_text

SUMMARY = "Expand include directives in a single file"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("file", help="Markdown file to expand")
    parser.add_argument(
        "--output",
        "-o",
        help="Write the expanded content to this file instead of stdout",
    )
    add_shift_arg(parser)
    add_max_depth_arg(parser)
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    """Expand one file - delegates to IncludeResolver."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    config = IncludeConfig()

    shift = args.shift if args.shift is not None else config.shift
    max_depth = args.max_depth if args.max_depth is not None else config.max_depth

    path = Path(args.file)
    try:
        text = read_text(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise IncludeReadError(f"Could not read {path}", context={"file": str(path)}) from exc

    resolver = IncludeResolver(shift=shift, max_depth=max_depth)
    content, report = resolver.resolve_with_report(text, path.parent, path)

    if args.output:
        try:
            Path(args.output).write_text(content, encoding="utf-8")
        except OSError as exc:
            raise ShiftIncludeError(
                f"Could not write {args.output}: {exc}", context={"output": args.output}
            ) from exc
        formatter.success(
            {"output": args.output, "report": report.to_dict()},
            f"Wrote {args.output} ({len(report.includes_resolved)} includes)",
        )
    else:
        formatter.success({"content": content, "report": report.to_dict()}, content)
    return 0
