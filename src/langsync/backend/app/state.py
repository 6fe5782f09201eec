"""Access to the per-application settings and updater."""

from __future__ import annotations

from dataclasses import dataclass

from flask import Flask, current_app

from langsync.backend.config.schema import SyncSettings
from langsync.backend.services.updater import LanguageFileUpdater

EXTENSION_KEY = "langsync"


@dataclass(frozen=True)
class AppState:
    settings: SyncSettings
    updater: LanguageFileUpdater


def init_state(app: Flask, settings: SyncSettings, updater: LanguageFileUpdater) -> None:
    app.extensions[EXTENSION_KEY] = AppState(settings=settings, updater=updater)


def get_state() -> AppState:
    return current_app.extensions[EXTENSION_KEY]


__all__ = ["AppState", "get_state", "init_state"]
