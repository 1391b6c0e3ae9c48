"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def load_fixture() -> Any:
    """Load a text fixture from tests/fixtures/<subdir>/<name>."""

    def _load(subdir: str, name: str) -> str:
        return (FIXTURES_DIR / subdir / name).read_text(encoding="utf-8")

    return _load


@pytest.fixture
def fixture_path() -> Any:
    """Return the path of tests/fixtures/<subdir>/<name>."""

    def _path(subdir: str, name: str) -> Path:
        return FIXTURES_DIR / subdir / name

    return _path
