"""Plain-text rendering of comparison output."""

from __future__ import annotations

from diffcheck.engine._types import FunctionTable
from diffcheck.schema import ComparisonOutput, DiffLine, FunctionDiff

DIVIDER = "-" * 65


def _row_text(row: DiffLine) -> str:
    if row.marker == "+":
        return f"+ {row.new}"
    if row.marker == "-":
        return f"- {row.original}"
    if row.marker == "~":
        return f"~ {row.new or row.original}"
    return f" {row.original}"


def render_function(diff: FunctionDiff, file_label: str) -> str:
    """Render one function's line diff with its file/function header."""
    lines = [DIVIDER, f"File: {file_label}", f"Function: {diff.name}", ""]
    lines.extend(_row_text(r) for r in diff.rows)
    lines.append("")
    return "\n".join(lines)


def render_report(output: ComparisonOutput) -> str:
    """Every function diff in order, followed by the summary."""
    parts = [render_function(f, output.meta.original_label) for f in output.functions]
    parts.append(output.summary_text)
    return "\n".join(parts)


def render_functions(table: FunctionTable) -> str:
    """One line per extracted function: name, signature and body line count."""
    return "\n".join(
        f"{name}: {block.signature} ({len(block.body_lines)} lines)"
        for name, block in table.items()
    )
