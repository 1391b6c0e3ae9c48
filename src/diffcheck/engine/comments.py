"""Comment removal for C-family source text."""

from __future__ import annotations

import re

# Non-greedy: each /* closes at the first following */
_BLOCK_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_LINE_COMMENT_RE = re.compile(r"//[^\n]*")


def strip_comments(text: str) -> str:
    """Remove ``/* ... */`` and ``//`` comments from *text*.

    Not aware of string or character literals: a ``/*`` or ``//`` inside a
    literal is treated as a real comment start.
    """
    text = _BLOCK_COMMENT_RE.sub("", text)
    return _LINE_COMMENT_RE.sub("", text)
