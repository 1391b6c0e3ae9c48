"""End-to-end pipeline: two source buffers → ComparisonOutput."""

from __future__ import annotations

import logging
import time

from diffcheck.engine.differ import diff_lines
from diffcheck.engine.extractor import extract_functions
from diffcheck.engine.matcher import MatchedFunction, match_functions
from diffcheck.engine.summarizer import build_summary, partition_functions
from diffcheck.schema import ComparisonOutput, DiffLine, FunctionDiff, Meta, Summary

logger = logging.getLogger(__name__)


def run_comparison(
    original_text: str,
    new_text: str,
    *,
    original_label: str = "Original",
    new_label: str = "New",
    include_unchanged: bool = False,
) -> ComparisonOutput:
    """Compare two source buffers function by function.

    Args:
        original_text: Raw text of the original source.
        new_text: Raw text of the new source.
        original_label: Display name of the original, used only for metadata.
        new_label: Display name of the new source.
        include_unchanged: Also emit line diffs for functions whose normalized
            bodies are identical.

    Returns:
        Fully populated :class:`ComparisonOutput`. Functions appear in
        lexicographic name order.
    """
    t0 = time.monotonic()

    orig_table = extract_functions(original_text)
    new_table = extract_functions(new_text)
    logger.debug(
        "Extracted %d original and %d new functions", len(orig_table), len(new_table)
    )

    functions: list[FunctionDiff] = []
    for m in match_functions(orig_table, new_table):
        status = m.status
        if status == "changed" or (status == "unchanged" and include_unchanged):
            functions.append(_diff_function(m))

    part = partition_functions(orig_table, new_table)

    elapsed_ms = (time.monotonic() - t0) * 1000
    meta = Meta(
        original_label=original_label,
        new_label=new_label,
        original_functions=len(orig_table),
        new_functions=len(new_table),
        timing_ms=round(elapsed_ms, 2),
    )

    return ComparisonOutput(
        meta=meta,
        functions=functions,
        summary=Summary(missing=part.missing, new=part.new, changed=part.changed),
        summary_text=build_summary(orig_table, new_table),
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _diff_function(m: MatchedFunction) -> FunctionDiff:
    """Run the line diff for a function present on both sides."""
    assert m.old is not None and m.new is not None

    rows = diff_lines(m.old.body_lines, m.new.body_lines)
    logger.debug("Diffed %s: %d rows", m.name, len(rows))

    return FunctionDiff(
        name=m.name,
        status=m.status,  # type: ignore[arg-type]
        original_signature=m.old.signature,
        new_signature=m.new.signature,
        rows=[
            DiffLine(marker=r.marker.value, original=r.original_text, new=r.new_text)  # type: ignore[arg-type]
            for r in rows
        ],
    )
