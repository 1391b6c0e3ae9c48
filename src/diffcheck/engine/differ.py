"""Line alignment between two versions of a function body.

LCS by dynamic programming over whitespace-normalized lines, followed by a
reorder pass that relabels added lines whose text was removed elsewhere.
Quadratic in time and space: meant for single function bodies, not whole files.
"""

from __future__ import annotations

from collections.abc import Sequence

from diffcheck.engine._types import DiffMarker, DiffRow
from diffcheck.engine.normalize import normalize_line


def lcs_table(a: Sequence[str], b: Sequence[str]) -> list[list[int]]:
    """Build the (len(a)+1) x (len(b)+1) suffix LCS table.

    ``dp[i][j]`` is the LCS length of ``a[i:]`` and ``b[j:]``; the last row
    and column are zero.
    """
    n, m = len(a), len(b)
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        row, below = dp[i], dp[i + 1]
        for j in range(m - 1, -1, -1):
            if a[i] == b[j]:
                row[j] = 1 + below[j + 1]
            else:
                row[j] = max(below[j], row[j + 1])
    return dp


def diff_lines(original_lines: Sequence[str], new_lines: Sequence[str]) -> list[DiffRow]:
    """Align two line sequences and classify each row.

    Lines are compared by :func:`normalize_line` but rows keep the raw text.
    On ties the backtrack emits the removal first, so output is deterministic.
    """
    a = [normalize_line(line) for line in original_lines]
    b = [normalize_line(line) for line in new_lines]
    n, m = len(a), len(b)
    dp = lcs_table(a, b)

    rows: list[DiffRow] = []
    i = j = 0
    while i < n and j < m:
        if a[i] == b[j]:
            rows.append(DiffRow(DiffMarker.UNCHANGED, original_lines[i], new_lines[j]))
            i += 1
            j += 1
        elif dp[i + 1][j] >= dp[i][j + 1]:
            rows.append(DiffRow(DiffMarker.REMOVED, original_text=original_lines[i]))
            i += 1
        else:
            rows.append(DiffRow(DiffMarker.ADDED, new_text=new_lines[j]))
            j += 1

    rows.extend(DiffRow(DiffMarker.REMOVED, original_text=line) for line in original_lines[i:])
    rows.extend(DiffRow(DiffMarker.ADDED, new_text=line) for line in new_lines[j:])

    return classify_reorders(rows)


def classify_reorders(rows: Sequence[DiffRow]) -> list[DiffRow]:
    """Relabel ADDED rows as REORDERED when an equal REMOVED row exists.

    Only the added side changes; the matching removed row stays REMOVED.
    """
    removed = [
        normalize_line(r.original_text) for r in rows if r.marker is DiffMarker.REMOVED
    ]
    out: list[DiffRow] = []
    for r in rows:
        if r.marker is DiffMarker.ADDED and normalize_line(r.new_text) in removed:
            out.append(DiffRow(DiffMarker.REORDERED, r.original_text, r.new_text))
        else:
            out.append(r)
    return out
