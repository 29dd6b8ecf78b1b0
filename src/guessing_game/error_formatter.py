# Area: Shared
"""Error formatting for structured fatal error blocks."""

from __future__ import annotations
from typing import Optional


def format_error_block(
    error_type: str,
    operation: str,
    detail: str,
    cause: Optional[BaseException] = None,
) -> str:
    """Format a boxed error block for a fatal game error."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " GAME ERROR — PROCESS TERMINATED",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Operation:    {operation}",
        "",
        " ── DETAIL " + "─" * 53,
        f" {detail}",
    ]

    if cause is not None:
        lines.append("")
        lines.append(" ── CAUSE " + "─" * 54)
        lines.append(f" {type(cause).__name__}: {cause}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)
