"""Summary of missing, new and changed functions between two tables."""

from __future__ import annotations

from typing import NamedTuple

from diffcheck.engine._types import FunctionTable
from diffcheck.engine.matcher import match_functions

SUMMARY_HEADER = "=== Summary ==="


class FunctionPartition(NamedTuple):
    """Function names grouped by how they differ, each list in lexicographic order."""

    missing: list[str]
    new: list[str]
    changed: list[str]


def partition_functions(orig: FunctionTable, new: FunctionTable) -> FunctionPartition:
    """Split names into missing-in-new, new-not-in-original and changed-body lists."""
    part = FunctionPartition(missing=[], new=[], changed=[])
    for m in match_functions(orig, new):
        status = m.status
        if status == "missing":
            part.missing.append(m.name)
        elif status == "new":
            part.new.append(m.name)
        elif status == "changed":
            part.changed.append(m.name)
    return part


def build_summary(orig: FunctionTable, new: FunctionTable) -> str:
    """Render the fixed-format summary text.

    All three sections are always present, even with a count of zero.
    """
    part = partition_functions(orig, new)
    lines = [SUMMARY_HEADER]

    lines.append(f"Missing functions in new ({len(part.missing)}):")
    lines.extend(f" - {name}" for name in part.missing)
    lines.append(f"New functions not in original ({len(part.new)}):")
    lines.extend(f" + {name}" for name in part.new)
    lines.append(f"Changed function bodies ({len(part.changed)}):")
    lines.extend(f" * {name}" for name in part.changed)

    return "\n".join(lines)
