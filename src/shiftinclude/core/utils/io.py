"""File I/O utilities.

Single source of truth for reading included files and YAML data:
- Text reads used by the include resolver
- YAML reads used by configuration loading
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Union

import yaml

PathLike = Union[str, Path]


def read_text(path: PathLike) -> str:
    """Read a UTF-8 text file with simple, explicit error handling.

    Args:
        path: Path to the text file

    Returns:
        str: File contents

    Raises:
        FileNotFoundError: If the file does not exist
        IsADirectoryError: If the path is a directory
        UnicodeDecodeError: If the file is not valid UTF-8
        Other I/O errors are propagated to callers
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Text file not found: {path}")
    if path.is_dir():
        raise IsADirectoryError(f"Expected a file, found a directory: {path}")
    return path.read_text(encoding="utf-8")


def read_yaml(path: PathLike, default: Any = None, raise_on_error: bool = False) -> Any:
    """Read YAML with error handling.

    Returns default if file is missing or invalid, unless raise_on_error is True.

    Args:
        path: YAML file path to read
        default: Value to return if file missing or invalid (default: None)
        raise_on_error: If True, propagate exceptions instead of returning default.

    Returns:
        Any: Parsed YAML data, or default if error
    """
    path = Path(path)
    if not path.exists():
        if raise_on_error:
            raise FileNotFoundError(f"File not found: {path}")
        return default

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data if data is not None else default
    except (OSError, yaml.YAMLError):
        if raise_on_error:
            raise
        return default


__all__ = ["PathLike", "read_text", "read_yaml"]
