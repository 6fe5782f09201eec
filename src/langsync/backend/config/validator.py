"""Utilities for validating synchronisation settings and surfacing issues."""

from __future__ import annotations

import argparse
import os
import shutil
from pathlib import Path
from typing import Sequence

from langsync.backend.catalog import (
    CatalogUnavailable,
    ModuleCatalog,
    is_sentinel,
    load_catalog,
)
from langsync.backend.services.errors import LocalePathError
from langsync.backend.services.locale_paths import FileFormat, resolve_locale_path

from .settings import (
    SETTINGS_ENV,
    ConfigurationError,
    SyncSettings,
    catalog_path,
    load_settings,
)


def _format_scope(scope: str, message: str) -> str:
    return f"{scope}: {message}"


def _validate_translator(settings: SyncSettings) -> list[str]:
    errors: list[str] = []
    executable = settings.translator.command[0]

    if shutil.which(executable) is None and not Path(executable).is_file():
        errors.append(
            _format_scope("translator.command", f"executable '{executable}' was not found")
        )

    return errors


def collect_notices(settings: SyncSettings) -> list[str]:
    """Return informational remarks that do not make the settings invalid."""

    notices: list[str] = []
    passthrough = [code for code in settings.locale_codes if code not in settings.translator_codes]
    if not settings.translator_codes:
        notices.append(
            _format_scope("locales", "no locale maps to a translator; entries will be copied verbatim")
        )
    elif passthrough:
        notices.append(
            _format_scope("locales", f"copied without translation: {', '.join(passthrough)}")
        )
    return notices


def _validate_catalog_files(
    catalog: ModuleCatalog, settings: SyncSettings, *, check_files: bool
) -> list[str]:
    errors: list[str] = []

    for name in catalog.module_names():
        entry = catalog[name]
        for file_format in FileFormat:
            scope = f"{name}.{file_format.value}"
            for file_name in entry.files_for(file_format.value):
                if is_sentinel(file_name):
                    continue
                if check_files and not Path(file_name).is_file():
                    errors.append(_format_scope(scope, f"file not found: {file_name}"))
                    continue
                try:
                    for locale in settings.locale_codes:
                        resolve_locale_path(
                            file_name,
                            file_format,
                            locale,
                            source_locale=settings.source_locale,
                        )
                except LocalePathError as error:
                    errors.append(_format_scope(scope, str(error)))

    return errors


def validate_settings(settings: SyncSettings, *, check_files: bool = True) -> list[str]:
    """Return human-readable issues detected for ``settings`` and its catalogue."""

    errors: list[str] = []
    errors.extend(_validate_translator(settings))

    try:
        catalog = load_catalog(catalog_path(settings))
    except CatalogUnavailable as error:
        errors.append(_format_scope("catalog_file", str(error)))
        return errors

    if not len(catalog):
        errors.append(_format_scope("catalog_file", "no modules declared"))

    errors.extend(_validate_catalog_files(catalog, settings, check_files=check_files))
    return errors


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate synchronisation settings and the module catalogue."
    )
    parser.add_argument(
        "--settings",
        type=Path,
        help=f"Settings file to validate (defaults to ${SETTINGS_ENV} or the bundled file)",
    )
    parser.add_argument(
        "--skip-file-checks",
        action="store_true",
        help="Do not verify that catalogue files exist on disk",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running validations from the command line."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)

    if args.settings is not None:
        os.environ[SETTINGS_ENV] = str(args.settings)
        load_settings.cache_clear()

    try:
        settings = load_settings()
    except (FileNotFoundError, ConfigurationError) as error:
        print(f"[settings] failed to load: {error}")
        return 1

    for notice in collect_notices(settings):
        print(f"[settings] note: {notice}")

    issues = validate_settings(settings, check_files=not args.skip_file_checks)
    if issues:
        print(f"[settings] {len(issues)} issue(s) detected:")
        for issue in issues:
            print(f"  - {issue}")
        return 1

    print("[settings] OK")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
