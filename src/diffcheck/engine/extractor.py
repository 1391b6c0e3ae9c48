"""Heuristic function extraction from C-family source text.

A regex locates ``name(args) {`` candidates and a brace-depth counter finds
each body's closing brace. This is not a parser: braces inside string or
character literals corrupt the depth count, and candidates whose braces never
balance are dropped without error.
"""

from __future__ import annotations

import re

from diffcheck.engine._types import FunctionBlock, FunctionTable
from diffcheck.engine.comments import strip_comments
from diffcheck.engine.normalize import normalize_body, to_lines

# Identifier (qualified names and destructors allowed), a flat argument list, then "{"
_FUNCTION_RE = re.compile(r"([\w:~]+)\s*\([^)]*\)\s*\{")


def find_matching_brace(text: str, open_pos: int) -> int | None:
    """Return the index of the ``}`` closing the ``{`` at *open_pos*, or None."""
    depth = 0
    for pos in range(open_pos, len(text)):
        c = text[pos]
        if c == "{":
            depth += 1
        elif c == "}":
            depth -= 1
            if depth == 0:
                return pos
    return None


def extract_functions(text: str) -> FunctionTable:
    """Extract function blocks from raw source text, keyed by function name.

    Comments are stripped first. When several definitions share a name the
    last one in the text wins.
    """
    s = strip_comments(text)
    entries: list[tuple[str, FunctionBlock]] = []

    for m in _FUNCTION_RE.finditer(s):
        start = m.start()
        brace_start = s.find("{", start)
        if brace_start < 0:
            continue
        end = find_matching_brace(s, brace_start)
        if end is None:
            continue

        body = s[brace_start + 1 : end]
        entries.append(
            (
                m.group(1).strip(),
                FunctionBlock(
                    signature=s[start:brace_start].strip(),
                    raw_body=body,
                    normalized_body=normalize_body(body),
                    body_lines=to_lines(body),
                ),
            )
        )

    return FunctionTable(entries)
