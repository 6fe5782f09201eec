"""Settings loader wrapping the shared schema models."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .schema import (
    ConfigurationError,
    LocaleConfig,
    SyncSettings,
    TranslatorConfig,
)

CONFIG_DIRECTORY = Path(__file__).resolve().parent / "data"
SETTINGS_FILE = CONFIG_DIRECTORY / "settings.yaml"

SETTINGS_ENV = "LANGSYNC_SETTINGS"
CATALOG_ENV = "LANGSYNC_CATALOG"


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Settings file must define a mapping at the top level")
    return data


def settings_path() -> Path:
    """Return the settings file in effect, honouring ``LANGSYNC_SETTINGS``."""

    override = os.getenv(SETTINGS_ENV)
    if override:
        return Path(override).expanduser()
    return SETTINGS_FILE


def parse_settings(raw: dict[str, Any]) -> SyncSettings:
    """Validate a raw mapping into :class:`SyncSettings`."""

    try:
        return SyncSettings.model_validate(raw)
    except ValidationError as error:
        raise ConfigurationError(f"Settings validation failed: {error}") from error


@lru_cache(maxsize=1)
def load_settings() -> SyncSettings:
    """Load and cache the synchronisation settings."""

    path = settings_path()
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")

    raw_settings = _load_yaml(path)

    catalog_override = os.getenv(CATALOG_ENV)
    if catalog_override:
        raw_settings["catalog_file"] = catalog_override

    return parse_settings(raw_settings)


def catalog_path(settings: SyncSettings) -> Path:
    """Resolve the catalog location; relative paths use the working directory."""

    return Path(settings.catalog_file).expanduser()


__all__ = [
    "CATALOG_ENV",
    "CONFIG_DIRECTORY",
    "ConfigurationError",
    "LocaleConfig",
    "SETTINGS_ENV",
    "SETTINGS_FILE",
    "SyncSettings",
    "TranslatorConfig",
    "catalog_path",
    "load_settings",
    "parse_settings",
    "settings_path",
]
