"""Shared types for the DiffCheck engine."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class FunctionBlock:
    """A function definition extracted from source text."""

    signature: str  # text from the name up to the opening brace
    raw_body: str  # text strictly between the outer braces
    normalized_body: str  # whitespace-canonical single-line form
    body_lines: tuple[str, ...]  # raw body split on newlines, \r removed


class FunctionTable(Mapping[str, FunctionBlock]):
    """Read-only name -> FunctionBlock mapping iterated in lexicographic key order."""

    __slots__ = ("_blocks",)

    def __init__(self, items: Iterable[tuple[str, FunctionBlock]] = ()) -> None:
        blocks: dict[str, FunctionBlock] = {}
        for name, block in items:
            # Later entries overwrite earlier ones
            blocks[name] = block
        self._blocks = {name: blocks[name] for name in sorted(blocks)}

    def __getitem__(self, name: str) -> FunctionBlock:
        return self._blocks[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._blocks)

    def __len__(self) -> int:
        return len(self._blocks)

    def __repr__(self) -> str:
        return f"FunctionTable({list(self._blocks)!r})"


class DiffMarker(str, enum.Enum):
    """Classification of one aligned line pair. Values are the display markers."""

    UNCHANGED = " "
    REMOVED = "-"
    ADDED = "+"
    REORDERED = "~"


@dataclass(frozen=True)
class DiffRow:
    """One row of a line alignment.

    Only UNCHANGED rows carry both texts; the others leave the missing side empty.
    """

    marker: DiffMarker
    original_text: str = ""
    new_text: str = ""

    @property
    def text(self) -> str:
        """Text shown for this row in a rendered diff."""
        if self.marker in (DiffMarker.ADDED, DiffMarker.REORDERED):
            return self.new_text or self.original_text
        return self.original_text


DiffSequence = list[DiffRow]
