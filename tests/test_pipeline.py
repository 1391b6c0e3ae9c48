"""Tests for the end-to-end comparison pipeline."""

from __future__ import annotations

from typing import Any

from diffcheck.engine.pipeline import run_comparison
from diffcheck.schema import ComparisonOutput

OLD_SRC = """\
int add(int a, int b)
{
    return a + b;
}

int twice(int x)
{
    int y = x;
    return y * 2;
}
"""

NEW_SRC = """\
int add(int a, int b) { return a + b; }

int twice(int x)
{
    return y * 2;
    int y = x;
}
"""


def test_fixture_comparison(load_fixture: Any) -> None:
    result = run_comparison(
        load_fixture("sources", "original.cpp"),
        load_fixture("sources", "new.cpp"),
        original_label="original.cpp",
        new_label="new.cpp",
    )
    assert isinstance(result, ComparisonOutput)
    assert result.meta.original_label == "original.cpp"
    assert result.meta.original_functions == 4
    assert result.meta.new_functions == 4
    assert result.meta.timing_ms is not None
    assert [f.name for f in result.functions] == ["compute", "greet"]
    assert result.summary.missing == ["legacy"]
    assert result.summary.new == ["farewell"]
    assert result.summary.changed == ["compute", "greet"]
    assert result.summary_text.startswith("=== Summary ===")

    compute = result.functions[0]
    assert compute.status == "changed"
    assert compute.original_signature == "compute(int x)"
    assert [r.marker for r in compute.rows] == [" ", " ", "-", "-", "+", " "]


def test_reordered_lines() -> None:
    result = run_comparison(OLD_SRC, NEW_SRC)
    assert [f.name for f in result.functions] == ["twice"]
    rows = result.functions[0].rows
    assert [(r.marker, r.original, r.new) for r in rows] == [
        (" ", "", ""),
        ("-", "    int y = x;", ""),
        (" ", "    return y * 2;", "    return y * 2;"),
        ("~", "", "    int y = x;"),
        (" ", "", ""),
    ]


def test_include_unchanged() -> None:
    result = run_comparison(OLD_SRC, NEW_SRC, include_unchanged=True)
    assert [f.name for f in result.functions] == ["add", "twice"]
    add = result.functions[0]
    assert add.status == "unchanged"
    # Same normalized body, but the blank edge lines only exist in the original
    assert [r.marker for r in add.rows] == ["-", " ", "-"]


def test_identical_sources_have_no_differences() -> None:
    result = run_comparison(OLD_SRC, OLD_SRC)
    assert result.functions == []
    assert not result.summary.has_differences


def test_empty_sources() -> None:
    result = run_comparison("", "")
    assert result.functions == []
    assert result.meta.original_functions == 0
    assert result.summary_text == (
        "=== Summary ===\n"
        "Missing functions in new (0):\n"
        "New functions not in original (0):\n"
        "Changed function bodies (0):"
    )
