"""DiffCheck output schema — Pydantic v2 models."""

from __future__ import annotations

import json
from typing import Literal

from pydantic import BaseModel


class DiffLine(BaseModel):
    """One aligned line of a function diff."""

    marker: Literal[" ", "-", "+", "~"]
    original: str = ""
    new: str = ""


class FunctionDiff(BaseModel):
    """Line-level comparison of one function present in both sources."""

    name: str
    status: Literal["changed", "unchanged"]
    original_signature: str
    new_signature: str
    rows: list[DiffLine] = []


class Summary(BaseModel):
    """Function names grouped by difference, each in lexicographic order."""

    missing: list[str] = []
    new: list[str] = []
    changed: list[str] = []

    @property
    def has_differences(self) -> bool:
        return bool(self.missing or self.new or self.changed)


class Meta(BaseModel):
    """Run metadata."""

    original_label: str
    new_label: str
    original_functions: int
    new_functions: int
    timing_ms: float | None = None


class ComparisonOutput(BaseModel):
    """Top-level DiffCheck output."""

    schema_version: str = "1.0"
    meta: Meta
    functions: list[FunctionDiff] = []
    summary: Summary = Summary()
    summary_text: str = ""


def export_json_schema() -> str:
    """Export the JSON schema as a string."""
    return json.dumps(ComparisonOutput.model_json_schema(), indent=2)
