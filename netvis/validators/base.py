"""Base classes for check results.

Checks only advise: nothing they find stops a graph from rendering, so
issues are either warnings (the output probably differs from what the
author meant) or info.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(str, Enum):
    """Severity level of a check issue."""

    WARNING = "warning"
    INFO = "info"


@dataclass
class ValidationIssue:
    """A single check issue."""

    code: str
    message: str
    severity: Severity
    node: int | None = None
    edge: tuple[int, int] | None = None
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def location(self) -> str:
        """Short location tag such as ``node 3`` or ``edge 0->1``."""
        if self.edge is not None:
            return f"edge {self.edge[0]}->{self.edge[1]}"
        if self.node is not None:
            return f"node {self.node}"
        return ""


@dataclass
class ValidationResult:
    """Result of running checks on a graph."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Get all warning-level issues."""
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def infos(self) -> list[ValidationIssue]:
        """Get all info-level issues."""
        return [i for i in self.issues if i.severity == Severity.INFO]

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    def add(
        self,
        severity: Severity,
        code: str,
        message: str,
        node: int | None = None,
        edge: tuple[int, int] | None = None,
        **details: Any,
    ) -> None:
        """Add an issue with the given severity."""
        self.issues.append(
            ValidationIssue(
                code=code,
                message=message,
                severity=severity,
                node=node,
                edge=edge,
                details=details,
            )
        )

    def add_warning(self, code: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.WARNING, code, message, **kwargs)

    def add_info(self, code: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.INFO, code, message, **kwargs)

    def merge(self, other: "ValidationResult") -> None:
        """Merge another result into this one."""
        self.issues.extend(other.issues)
