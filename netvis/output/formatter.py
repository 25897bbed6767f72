"""Output formatting for check results."""

import json
from typing import Literal

from ..validators.base import Severity, ValidationIssue, ValidationResult


def format_check_result(
    result: ValidationResult,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a check result for output.

    Args:
        result: The check result to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _format_json(result)
    return _format_text(result)


def _format_text(result: ValidationResult) -> str:
    """Format result as human-readable text."""
    lines: list[str] = []

    for heading, issues in (("WARNINGS:", result.warnings), ("INFO:", result.infos)):
        lines.append(heading)
        if issues:
            for issue in issues:
                lines.append(f"  {_format_issue_text(issue)}")
        else:
            lines.append("  (none)")
        lines.append("")

    warnings = result.warnings
    if warnings:
        lines.append(f"Check found {len(warnings)} warning(s)")
    else:
        lines.append("Check passed")

    return "\n".join(lines)


def _format_issue_text(issue: ValidationIssue) -> str:
    """Format a single issue as text."""
    location = f"[{issue.location}] " if issue.location else ""
    symbol = "⚠" if issue.severity == Severity.WARNING else "ℹ"
    return f"{symbol} {issue.code}: {location}{issue.message}"


def _format_json(result: ValidationResult) -> str:
    """Format result as JSON."""
    data = {
        "clean": not result.has_warnings,
        "warning_count": len(result.warnings),
        "info_count": len(result.infos),
        "issues": [
            {
                "code": issue.code,
                "message": issue.message,
                "severity": issue.severity.value,
                "node": issue.node,
                "edge": list(issue.edge) if issue.edge is not None else None,
                "details": issue.details,
            }
            for issue in result.issues
        ],
    }
    return json.dumps(data, indent=2)
