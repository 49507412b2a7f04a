"""JSON Schema validation for shiftinclude payloads."""
from __future__ import annotations

from .validation import load_schema, validate_payload, validate_payload_safe

__all__ = ["load_schema", "validate_payload", "validate_payload_safe"]
