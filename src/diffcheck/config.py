"""Persistent settings stored as a JSON file."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, ValidationError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "DIFFCHECK_CONFIG"


class ConfigError(ValueError):
    """Settings file exists but cannot be read as valid settings."""


class Settings(BaseModel):
    """User defaults for the ``compare`` command. CLI flags take precedence."""

    model_config = ConfigDict(extra="forbid")

    format: Literal["text", "json", "summary"] = "text"
    show_unchanged: bool = False
    overwrite: bool = False  # allow --output to replace an existing file


def default_config_path() -> Path | None:
    """Path named by ``DIFFCHECK_CONFIG``, if set."""
    value = os.environ.get(CONFIG_ENV_VAR)
    return Path(value) if value else None


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings from *path* (or the env default). Missing file → defaults."""
    if path is None:
        path = default_config_path()
    if path is None:
        return Settings()

    path = Path(path)
    if not path.exists():
        logger.debug("No settings file at %s, using defaults", path)
        return Settings()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return Settings.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as exc:
        msg = f"Invalid settings file {path}: {exc}"
        logger.error(msg)
        raise ConfigError(msg) from exc


def save_settings(settings: Settings, path: str | Path) -> None:
    """Write *settings* as indented JSON, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(settings.model_dump_json(indent=2) + "\n", encoding="utf-8")
