"""
Auto-discovery CLI dispatcher for shiftinclude.

Scans ``cli/commands`` for command modules and registers them. Adding a new
command = adding a .py file to that folder.

mdBook runs a preprocessor in two ways: ``shiftinclude supports <renderer>``
and plain ``shiftinclude`` with the book on stdin. The latter maps to the
``preprocess`` command.
"""

from __future__ import annotations

import argparse
import importlib
import sys
from functools import lru_cache
from pathlib import Path
from typing import Any

from shiftinclude.cli._args import add_log_level_flag
from shiftinclude.cli._output import OutputFormatter
from shiftinclude.core.exceptions import ShiftIncludeError
from shiftinclude.core.logging import configure_stdlib_logging

DEFAULT_COMMAND = "preprocess"


@lru_cache(maxsize=1)
def discover_root_commands() -> dict[str, dict[str, Any]]:
    """Discover top-level commands under cli/commands."""
    commands_dir = Path(__file__).parent / "commands"
    commands: dict[str, dict[str, Any]] = {}

    for item in sorted(commands_dir.glob("*.py")):
        if item.name.startswith("_"):
            continue

        cmd_name = item.stem
        try:
            module = importlib.import_module(f"shiftinclude.cli.commands.{cmd_name}")
        except ImportError as e:
            print(f"Warning: Could not import command {cmd_name}: {e}", file=sys.stderr)
            continue
        commands[cmd_name] = {
            "module": module,
            "summary": getattr(module, "SUMMARY", cmd_name),
            "register_args": getattr(module, "register_args", None),
            "main": getattr(module, "main", None),
        }

    return commands


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser with auto-discovered commands.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="shiftinclude",
        description="An mdbook preprocessor which includes files with shift",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )
    add_log_level_flag(parser)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description=f"Available commands (default: {DEFAULT_COMMAND})",
        metavar="<command>",
    )

    for cmd_name, cmd_info in sorted(discover_root_commands().items()):
        primary_name = cmd_name.replace("_", "-")
        aliases = [cmd_name] if primary_name != cmd_name else []
        cmd_parser = subparsers.add_parser(
            primary_name,
            aliases=aliases,
            help=cmd_info["summary"],
        )
        if cmd_info["register_args"]:
            cmd_info["register_args"](cmd_parser)
        if cmd_info["main"]:
            cmd_parser.set_defaults(_func=cmd_info["main"])

    return parser


def _get_version() -> str:
    """Get shiftinclude version string."""
    from shiftinclude import __version__
    return __version__


def _configure_logging(args: argparse.Namespace) -> None:
    level = getattr(args, "log_level", None)
    if not level:
        from shiftinclude.core.config import IncludeConfig

        level = IncludeConfig().log_level
    configure_stdlib_logging(level=level)


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the shiftinclude CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    if not getattr(args, "_func", None):
        default = discover_root_commands().get(DEFAULT_COMMAND)
        if default is None or default["main"] is None:
            parser.print_help()
            return 0
        if default["register_args"]:
            # Fill in the default command's own options.
            default_parser = argparse.ArgumentParser(add_help=False)
            default["register_args"](default_parser)
            for key, value in vars(default_parser.parse_args([])).items():
                if not hasattr(args, key):
                    setattr(args, key, value)
        args._func = default["main"]

    try:
        _configure_logging(args)
        return int(args._func(args) or 0)
    except ShiftIncludeError as exc:
        OutputFormatter(json_mode=getattr(args, "json", False)).error(exc, error_code=exc.__class__.__name__)
        return 1


__all__ = ["build_parser", "discover_root_commands", "main"]
