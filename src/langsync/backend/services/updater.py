"""Propagate new entries from a source-locale file to every configured locale."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Sequence

from langsync.backend.config.schema import SyncSettings
from langsync.backend.config.settings import load_settings

from .errors import BadUpdateRequest, FileFormatError, LocalePathError
from .locale_paths import FileFormat, resolve_language_files
from .mutators import append_entries
from .translation import CommandTranslator, TextTranslator

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Language files updated successfully"
MISSING_PARAMETERS_MESSAGE = "Missing required parameters: filePath, entries, or fileType"


class OutcomeStatus(str, Enum):
    OK = "ok"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class LocaleOutcome:
    """Result of updating one locale's file."""

    locale: str
    status: OutcomeStatus
    message: str
    path: Path | None = None

    @classmethod
    def ok(cls, locale: str, summary: str, path: Path) -> LocaleOutcome:
        return cls(locale, OutcomeStatus.OK, summary, path)

    @classmethod
    def skipped(cls, locale: str, path: Path) -> LocaleOutcome:
        return cls(locale, OutcomeStatus.SKIPPED, "file not found", path)

    @classmethod
    def failed(cls, locale: str, reason: str, path: Path | None = None) -> LocaleOutcome:
        return cls(locale, OutcomeStatus.FAILED, reason, path)

    def render(self) -> str:
        """Return the detail line shown to users, tagged with the locale."""

        if self.status is OutcomeStatus.OK:
            return f"[{self.locale}] {self.message}"
        if self.status is OutcomeStatus.SKIPPED:
            name = self.path.name if self.path else self.locale
            return f"[{self.locale}] Skipped: {name} ({self.message})"
        return f"Failed to update {self.locale}: {self.message}"


@dataclass(frozen=True)
class UpdateResult:
    """Aggregated outcome of one update request."""

    success: bool
    message: str
    outcomes: tuple[LocaleOutcome, ...] = ()

    @property
    def details(self) -> list[str]:
        return [outcome.render() for outcome in self.outcomes]

    def as_dict(self) -> dict[str, Any]:
        return {"success": self.success, "message": self.message, "details": self.details}


def _validate_request(
    file_path: Path | str | None,
    entries: Mapping[str, str] | None,
    file_type: FileFormat | str | None,
) -> tuple[Path, dict[str, str], FileFormat]:
    if not file_path or not entries or not file_type:
        raise BadUpdateRequest(MISSING_PARAMETERS_MESSAGE)
    if not isinstance(entries, Mapping):
        raise BadUpdateRequest("Entries must be a mapping of keys to values")

    try:
        file_format = FileFormat.parse(file_type)
    except ValueError as exc:
        raise BadUpdateRequest(str(exc)) from exc

    cleaned: dict[str, str] = {}
    for key, value in entries.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise BadUpdateRequest("Entry keys and values must be strings")
        if not key or not value:
            raise BadUpdateRequest("Entry keys and values must be non-empty")
        if "\n" in key or "\n" in value or "\r" in key or "\r" in value:
            raise BadUpdateRequest(f"Entry {key!r} must fit on a single line")
        cleaned[key] = value

    return Path(file_path), cleaned, file_format


class LanguageFileUpdater:
    """Apply one entry set to the source file and every configured locale."""

    def __init__(
        self,
        settings: SyncSettings,
        translator: TextTranslator | None = None,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._settings = settings
        self._translator = translator if translator is not None else CommandTranslator(
            settings.translator_codes,
            settings.translator.command,
            timeout=settings.translator.timeout_seconds,
        )
        self._sleep = sleep

    @property
    def source_locale(self) -> str:
        return self._settings.source_locale

    @property
    def locales(self) -> Sequence[str]:
        return self._settings.locale_codes

    def _translate_entries(self, entries: Mapping[str, str], locale: str) -> dict[str, str]:
        return {key: self._translator.translate(value, locale) for key, value in entries.items()}

    def run(
        self,
        file_path: Path | str | None,
        entries: Mapping[str, str] | None,
        file_type: FileFormat | str | None,
    ) -> UpdateResult:
        """Update ``file_path`` and its sibling locale files with ``entries``.

        Raises :class:`BadUpdateRequest` before touching any file when the
        request is incomplete. Only problems with the source file make the
        result unsuccessful; locale-level problems are reported in the
        outcomes.
        """

        source_path, entries, file_format = _validate_request(file_path, entries, file_type)
        source_locale = self.source_locale

        logger.info(
            "Processing %s update for %s (%d entries)",
            file_format.value,
            source_path,
            len(entries),
        )

        try:
            language_files = resolve_language_files(
                source_path, file_format, self.locales, source_locale=source_locale
            )
        except LocalePathError as exc:
            logger.error("Refusing update for %s: %s", source_path, exc)
            return UpdateResult(success=False, message=str(exc))

        outcomes: list[LocaleOutcome] = []

        try:
            summary = append_entries(source_path, entries, file_format)
        except (FileFormatError, OSError) as exc:
            logger.error("Failed to update source file %s: %s", source_path, exc)
            outcomes.append(LocaleOutcome.failed(source_locale, str(exc), source_path))
            return UpdateResult(success=False, message=str(exc), outcomes=tuple(outcomes))
        outcomes.append(LocaleOutcome.ok(source_locale, summary, source_path))

        for locale in self.locales:
            outcome = self._update_locale(locale, language_files[locale], entries, file_format)
            outcomes.append(outcome)
            if outcome.status is not OutcomeStatus.SKIPPED:
                self._sleep(self._settings.translator.pacing_delay_seconds)

        for outcome in outcomes:
            log = logger.warning if outcome.status is OutcomeStatus.FAILED else logger.info
            log("%s", outcome.render())

        return UpdateResult(success=True, message=SUCCESS_MESSAGE, outcomes=tuple(outcomes))

    def _update_locale(
        self,
        locale: str,
        path: Path,
        entries: Mapping[str, str],
        file_format: FileFormat,
    ) -> LocaleOutcome:
        if not path.is_file():
            return LocaleOutcome.skipped(locale, path)

        translated = self._translate_entries(entries, locale)
        try:
            summary = append_entries(path, translated, file_format)
        except (FileFormatError, OSError) as exc:
            return LocaleOutcome.failed(locale, str(exc), path)
        return LocaleOutcome.ok(locale, summary, path)


def process_language_update(
    file_path: Path | str | None,
    entries: Mapping[str, str] | None,
    file_type: FileFormat | str | None,
    *,
    settings: SyncSettings | None = None,
    translator: TextTranslator | None = None,
) -> UpdateResult:
    """Run an update, loading the settings from disk unless ``settings`` is given."""

    if settings is None:
        settings = load_settings()
    updater = LanguageFileUpdater(settings, translator)
    return updater.run(file_path, entries, file_type)


__all__ = [
    "LanguageFileUpdater",
    "LocaleOutcome",
    "MISSING_PARAMETERS_MESSAGE",
    "OutcomeStatus",
    "SUCCESS_MESSAGE",
    "UpdateResult",
    "process_language_update",
]
