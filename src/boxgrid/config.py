"""Settings for the boxgrid CLI. Stored as JSON at ~/.boxgrid.json."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from boxgrid.borders import border_styles
from boxgrid.color import FONT_CODES
from boxgrid.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "BOXGRID_CONFIG"


@dataclass
class Settings:
    """Rendering defaults."""

    border: str = "default"
    header_color: str | None = None
    header_font: str | None = None


def settings_path() -> Path:
    return Path(os.environ.get(CONFIG_ENV_VAR, Path.home() / ".boxgrid.json"))


def settings_from_dict(data: dict) -> Settings:
    """Deserialize settings from a JSON-compatible dict (camelCase keys)."""
    for key, nullable in (("border", False), ("headerColor", True), ("headerFont", True)):
        if key not in data or (nullable and data[key] is None):
            continue
        value = data[key]
        if not isinstance(value, str):
            raise ConfigError(f"{key} must be a string, got {type(value).__name__}")
    settings = Settings(
        border=data.get("border", "default"),
        header_color=data.get("headerColor"),
        header_font=data.get("headerFont"),
    )
    if settings.border not in border_styles():
        raise ConfigError(
            f"Unknown border style {settings.border!r}; "
            f"expected one of {', '.join(border_styles())}"
        )
    if settings.header_font is not None and settings.header_font not in FONT_CODES:
        raise ConfigError(f"Unknown header font {settings.header_font!r}")
    return settings


def settings_to_dict(settings: Settings) -> dict:
    data: dict = {"border": settings.border}
    if settings.header_color is not None:
        data["headerColor"] = settings.header_color
    if settings.header_font is not None:
        data["headerFont"] = settings.header_font
    return data


def load_settings(path: Path | str | None = None) -> Settings:
    """Load settings from *path* (default :func:`settings_path`).

    A missing file gives defaults; a file that cannot be parsed raises
    :class:`ConfigError`.
    """
    config_path = Path(path) if path is not None else settings_path()
    if not config_path.exists():
        return Settings()
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Could not read settings from %s: %s", config_path, e)
        raise ConfigError(f"Error reading config {config_path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config {config_path} must hold a JSON object")
    logger.debug("Loaded settings from %s", config_path)
    return settings_from_dict(data)


def save_settings(settings: Settings, path: Path | str | None = None) -> None:
    config_path = Path(path) if path is not None else settings_path()
    config_path.write_text(json.dumps(settings_to_dict(settings), indent=2), encoding="utf-8")
