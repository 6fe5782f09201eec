"""Unit tests for sibling locale path derivation."""

from __future__ import annotations

from pathlib import Path

import pytest

from langsync.backend.services import (
    FileFormat,
    LocalePathError,
    resolve_language_files,
    resolve_locale_path,
)


def test_properties_path_swaps_locale_segment() -> None:
    resolved = resolve_locale_path(
        "/srv/app/billing/i18n/en/messages.properties", FileFormat.PROPERTIES, "fr"
    )

    assert resolved == Path("/srv/app/billing/i18n/fr/messages.properties")


def test_properties_path_only_swaps_first_directory_segment() -> None:
    resolved = resolve_locale_path("./en/docs/en/en.properties", "properties", "de")

    assert resolved == Path("de/docs/en/en.properties")


def test_properties_path_without_locale_segment_fails() -> None:
    with pytest.raises(LocalePathError, match="no 'en' directory segment"):
        resolve_locale_path("/srv/app/i18n/messages_en.properties", "properties", "fr")


def test_properties_file_name_is_not_a_locale_segment() -> None:
    with pytest.raises(LocalePathError):
        resolve_locale_path("/srv/app/i18n/en", "properties", "fr")


def test_script_path_swaps_directory_and_prefix() -> None:
    resolved = resolve_locale_path("/srv/lang/en/en_cm.js", FileFormat.SCRIPT_OBJECT, "da")

    assert resolved == Path("/srv/lang/da/da_cm.js")


def test_script_path_keeps_inner_locale_text() -> None:
    resolved = resolve_locale_path("/srv/lang/en/en_open_en.js", "javascript", "ptbr")

    assert resolved == Path("/srv/lang/ptbr/ptbr_open_en.js")


def test_script_path_requires_locale_directory() -> None:
    with pytest.raises(LocalePathError, match="not inside a 'en' directory"):
        resolve_locale_path("/srv/lang/common/en_cm.js", "javascript", "da")


def test_script_path_requires_locale_prefix() -> None:
    with pytest.raises(LocalePathError, match="lacks the 'en_' prefix"):
        resolve_locale_path("/srv/lang/en/cm.js", "javascript", "da")


def test_custom_source_locale() -> None:
    resolved = resolve_locale_path(
        "/srv/lang/de/de_cm.js", "javascript", "fr", source_locale="de"
    )

    assert resolved == Path("/srv/lang/fr/fr_cm.js")


def test_source_locale_resolves_to_itself() -> None:
    source = Path("/srv/i18n/en/a.properties")

    assert resolve_locale_path(source, "properties", "en") == source


def test_unknown_file_format_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unsupported file type"):
        resolve_locale_path("/srv/i18n/en/a.json", "json", "fr")


def test_resolve_language_files_orders_source_first() -> None:
    files = resolve_language_files(
        "/srv/i18n/en/a.properties", "properties", ["fr", "de"]
    )

    assert list(files) == ["en", "fr", "de"]
    assert files["de"] == Path("/srv/i18n/de/a.properties")
