from __future__ import annotations

from typing import Any, Dict, Mapping


class ShiftIncludeError(Exception):
    """Base exception for shiftinclude."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class IncludeReadError(ShiftIncludeError, OSError):
    """Raised when the target of an include directive cannot be read."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ShiftIncludeError.__init__(self, message, context=context)
        OSError.__init__(self, message)


class ConfigValidationError(ShiftIncludeError, ValueError):
    """Raised when merged configuration does not match the config schema."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ShiftIncludeError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class PreprocessorInputError(ShiftIncludeError, ValueError):
    """Raised when the preprocessor input is not a ``[context, book]`` JSON pair."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ShiftIncludeError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


__all__ = [
    "ShiftIncludeError",
    "IncludeReadError",
    "ConfigValidationError",
    "PreprocessorInputError",
]
