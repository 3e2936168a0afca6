"""Convenience formatters for scan results.

Optional: consumers can render FileResult however they like.
"""

import json
from dataclasses import asdict

from apexscope.models import FileResult

KINDS = ("class", "interface", "enum", "method", "property")


def format_text_report(result: FileResult) -> str:
    """Format a FileResult as a human-readable listing of kept lines."""
    lines: list[str] = []

    lines.append("")
    lines.append("=" * 60)
    lines.append(
        f"  {result.path} — {len(result.lines)} documentable"
        f" of {result.total_lines} lines"
    )
    lines.append("=" * 60)

    if not result.lines:
        lines.append("  (nothing to document)")
        return "\n".join(lines)

    for entry in result.lines:
        scope = entry.scope or "-"
        display = f"{entry.text[:60]}..." if len(entry.text) > 60 else entry.text
        lines.append(
            f"  {entry.line_number:>5}  {scope:<10} {entry.kind:<9} {display}"
        )

    return "\n".join(lines)


def format_text_summary(results: list[FileResult]) -> str:
    """Format a per-file table of declaration counts.

    Args:
        results: One FileResult per scanned file.
    """
    lines: list[str] = []
    lines.append("")
    lines.append("=" * 70)
    lines.append(f"  SUMMARY: {len(results)} files")
    lines.append("=" * 70)

    path_w = min(max([len(r.path) for r in results] + [4]), 40)
    header = f"  {'File':<{path_w}}" + "".join(f"  {k[:5]:>5}" for k in KINDS)
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))

    for result in results:
        path = result.path if len(result.path) <= path_w else "..." + result.path[-(path_w - 3):]
        counts = "".join(f"  {result.count(k):>5}" for k in KINDS)
        lines.append(f"  {path:<{path_w}}{counts}")

    if results:
        lines.append("  " + "-" * (len(header) - 2))
        totals = "".join(f"  {sum(r.count(k) for r in results):>5}" for k in KINDS)
        lines.append(f"  {'Total':<{path_w}}{totals}")

    lines.append("=" * 70)
    return "\n".join(lines)


def format_json(results: list[FileResult]) -> str:
    """Format scan results as JSON."""
    return json.dumps([asdict(r) for r in results], indent=2)
