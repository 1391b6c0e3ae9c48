"""Retrieval of file contents at git refs.

All git subprocess calls live here. Nothing else touches git.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


def split_ref_range(ref_range: str) -> tuple[str, str]:
    """Split ``OLD..NEW`` into its refs. A single ref compares ``REF~1`` to ``REF``."""
    parts = ref_range.split("..")
    if len(parts) == 2 and all(parts):  # noqa: PLR2004
        return parts[0], parts[1]
    if len(parts) == 1 and parts[0]:
        return f"{parts[0]}~1", parts[0]
    raise ValueError(f"Invalid ref range '{ref_range}'")


def get_file_at_ref(
    ref: str,
    file_path: str,
    repo_path: str | Path = ".",
) -> str:
    """Return the contents of *file_path* at *ref*.

    Raises:
        RuntimeError: git could not produce the file.
    """
    result = subprocess.run(
        ["git", "show", f"{ref}:{file_path}"],
        capture_output=True,
        text=True,
        cwd=str(repo_path),
        check=False,
    )
    if result.returncode != 0:
        stderr = result.stderr.strip()
        lowered = stderr.lower()
        first_line = stderr.split("\n")[0] if stderr else "unknown error"
        if "not a git repository" in lowered:
            msg = f"Not a git repository: {repo_path}"
        elif "does not exist" in lowered or "exists on disk, but not in" in lowered:
            msg = f"'{file_path}' not found at {ref}"
        elif any(s in lowered for s in ("unknown revision", "bad revision", "invalid object name")):
            msg = f"Invalid ref '{ref}': {first_line}"
        else:
            msg = f"git show failed: {first_line}"
        logger.error(msg)
        raise RuntimeError(msg)
    return result.stdout
