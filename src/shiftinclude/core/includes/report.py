"""Include resolution reporting.

Provides a structured report for a single resolution call.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class IncludeReport:
    """Report from resolving one text block.

    Contains:
    - Files read for include directives
    - Escaped directives rendered
    - Depth ceiling hits
    - Warnings and errors
    """

    source: Optional[Path] = None
    timestamp: datetime = field(default_factory=datetime.now)

    includes_resolved: List[str] = field(default_factory=list)
    escapes_rendered: int = 0
    depth_exceeded: int = 0

    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def has_issues(self) -> bool:
        """Check if there are any warnings or errors."""
        return bool(self.warnings or self.errors)

    def record_include(self, path: Path) -> None:
        self.includes_resolved.append(str(path))

    def record_escape(self) -> None:
        self.escapes_rendered += 1

    def record_depth_exceeded(self, message: str) -> None:
        self.depth_exceeded += 1
        self.warnings.append(message)

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to dictionary for serialization."""
        return {
            "source": str(self.source) if self.source else None,
            "timestamp": self.timestamp.isoformat(),
            "includes_resolved": list(self.includes_resolved),
            "escapes_rendered": self.escapes_rendered,
            "depth_exceeded": self.depth_exceeded,
            "warnings": list(self.warnings),
            "errors": list(self.errors),
        }


__all__ = ["IncludeReport"]
