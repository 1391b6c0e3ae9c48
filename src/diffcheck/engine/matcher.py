"""Function matching — pairs same-named blocks across two function tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from diffcheck.engine._types import FunctionBlock, FunctionTable

MatchStatus = Literal["missing", "new", "changed", "unchanged"]


@dataclass(frozen=True)
class MatchedFunction:
    """A same-named pair of blocks, or a block present on one side only."""

    name: str
    old: FunctionBlock | None  # None = new in the second table
    new: FunctionBlock | None  # None = missing from the second table

    @property
    def status(self) -> MatchStatus:
        if self.new is None:
            return "missing"
        if self.old is None:
            return "new"
        if self.old.normalized_body != self.new.normalized_body:
            return "changed"
        return "unchanged"


def match_functions(orig: FunctionTable, new: FunctionTable) -> list[MatchedFunction]:
    """Pair functions by name across *orig* and *new*, in lexicographic name order."""
    names = sorted({*orig, *new})
    return [MatchedFunction(name=name, old=orig.get(name), new=new.get(name)) for name in names]
