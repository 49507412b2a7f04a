"""
shiftinclude CLI package.

Commands are discovered from the ``commands`` subpackage. Each command module
exposes ``SUMMARY``, ``register_args(parser)`` and ``main(args) -> int``.

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
"""
from ._output import OutputFormatter
from ._args import (
    add_json_flag,
    add_log_level_flag,
    add_max_depth_arg,
    add_shift_arg,
)

__all__ = [
    # Output formatting
    "OutputFormatter",
    # Argument helpers
    "add_json_flag",
    "add_log_level_flag",
    "add_max_depth_arg",
    "add_shift_arg",
]
