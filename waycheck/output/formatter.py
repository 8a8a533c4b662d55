"""Output formatting for check results."""

import json
from typing import Literal

from ..checks.base import CheckFlag, CheckResult


def format_check_result(
    result: CheckResult,
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


def _format_text(result: CheckResult) -> str:
    """Format result as human-readable text."""
    lines: list[str] = ["FLAGS:"]
    if result.flags:
        for flag in result.flags:
            lines.append(f"  {_format_flag_text(flag)}")
    else:
        lines.append("  (none)")

    # Summary
    lines.append("")
    if result.has_flags:
        lines.append(
            f"Check found {len(result.flags)} flag(s) "
            f"in {result.evaluated} eligible edge(s)"
        )
    else:
        lines.append(f"Check passed ({result.evaluated} eligible edge(s))")

    return "\n".join(lines)


def _format_flag_text(flag: CheckFlag) -> str:
    """Format a single flag as text."""
    points = ", ".join(str(p) for p in flag.points)
    return f"⚠ {flag.check} [edge {flag.identifier}] {flag.instruction} @ {points}"


def _format_json(result: CheckResult) -> str:
    """Format result as JSON."""
    data = {
        "flag_count": len(result.flags),
        "evaluated": result.evaluated,
        "flags": [
            {
                "check": flag.check,
                "identifier": flag.identifier,
                "instruction": flag.instruction,
                "points": [[p.longitude, p.latitude] for p in flag.points],
                "details": flag.details,
            }
            for flag in result.flags
        ],
    }
    return json.dumps(data, indent=2)
