"""Whitespace normalization for style-insensitive comparison."""

from __future__ import annotations

import re

_WS_RE = re.compile(r"\s+")
_OPEN_BRACE_RE = re.compile(r"\s*\{\s*")
_CLOSE_BRACE_RE = re.compile(r"\s*\}\s*")


def normalize_body(body: str) -> str:
    """Collapse a function body into its canonical single-line form.

    Two bodies are the same iff their normalized forms are equal strings.
    """
    s = body.replace("\r", "").replace("\t", " ")
    s = _WS_RE.sub(" ", s)
    s = _OPEN_BRACE_RE.sub("{", s)
    s = _CLOSE_BRACE_RE.sub("}", s)
    return s.strip()


def normalize_line(line: str) -> str:
    """Comparison key for a single line: tabs to spaces, runs collapsed, trimmed."""
    return _WS_RE.sub(" ", line.replace("\t", " ")).strip()


def to_lines(text: str) -> tuple[str, ...]:
    """Split *text* on ``\\n`` after dropping carriage returns. Empty parts are kept."""
    return tuple(text.replace("\r", "").split("\n"))
