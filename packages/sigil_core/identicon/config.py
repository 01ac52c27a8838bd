"""Theme loading from JSON files and environment variables.

Supported variables:

- ``SIGIL_THEME_PATH``: JSON file with any of ``rows``, ``foreground``, ``background``.
- ``SIGIL_THEME_ROWS``: grid size, overrides the file.
- ``SIGIL_THEME_FOREGROUND``: comma-separated colours, e.g. ``#2d4fff,#feb42c``.
- ``SIGIL_THEME_BACKGROUND``: single colour.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .cells import MAX_ROWS, MIN_ROWS
from .errors import ThemeConfigError
from .theme import DEFAULT_BACKGROUND, DEFAULT_FOREGROUND, DEFAULT_ROWS, DEFAULT_THEME, Theme

logger = logging.getLogger("sigil_core.identicon.config")


class ThemeSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    rows: int = Field(default=DEFAULT_ROWS, ge=MIN_ROWS, le=MAX_ROWS)
    foreground: list[Any] = Field(
        default_factory=lambda: list(DEFAULT_FOREGROUND),
        min_length=1,
        description="Colours as '#rrggbb' strings or [r, g, b] lists",
    )
    background: Any = Field(default=DEFAULT_BACKGROUND)

    @field_validator("rows", mode="before")
    @classmethod
    def _reject_bool_rows(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("rows must be an integer, not a boolean")
        return value


def _first_non_empty(*values: str | None) -> str | None:
    for value in values:
        if value and value.strip():
            return value.strip()
    return None


def theme_from_mapping(data: Mapping[str, Any]) -> Theme:
    try:
        settings = ThemeSettings.model_validate(dict(data))
    except ValidationError as exc:
        logger.warning("[CONFIG] Invalid theme settings: %d errors", exc.error_count())
        raise ThemeConfigError(f"Invalid theme settings: {exc}", error_code="invalid_theme") from exc

    return Theme(
        rows=settings.rows,
        foreground=tuple(settings.foreground),
        background=settings.background,
    )


def load_theme(path: Path) -> Theme:
    logger.info("[CONFIG] Loading theme file: %s", path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise ThemeConfigError(f"Cannot read theme file {path}: {exc}", error_code="invalid_theme_file") from exc

    if not isinstance(data, dict):
        raise ThemeConfigError(f"Theme file {path} must contain a JSON object", error_code="invalid_theme_file")
    return theme_from_mapping(data)


def theme_from_env(environ: Optional[Mapping[str, str]] = None) -> Theme:
    env = os.environ if environ is None else environ

    data: dict[str, Any] = {}
    theme_path = _first_non_empty(env.get("SIGIL_THEME_PATH"))
    if theme_path:
        base = load_theme(Path(theme_path))
        data = {"rows": base.rows, "foreground": list(base.foreground), "background": base.background}

    rows = _first_non_empty(env.get("SIGIL_THEME_ROWS"))
    if rows:
        data["rows"] = rows

    foreground = _first_non_empty(env.get("SIGIL_THEME_FOREGROUND"))
    if foreground:
        data["foreground"] = [part.strip() for part in foreground.split(",") if part.strip()]

    background = _first_non_empty(env.get("SIGIL_THEME_BACKGROUND"))
    if background:
        data["background"] = background

    if not data:
        return DEFAULT_THEME
    return theme_from_mapping(data)
