"""Command line interface for browsing the catalogue and updating language files."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Sequence

from langsync.backend.catalog import CatalogUnavailable, load_catalog
from langsync.backend.config.settings import (
    ConfigurationError,
    catalog_path,
    load_settings,
)
from langsync.backend.services.entry_parser import parse_entry_text
from langsync.backend.services.errors import BadUpdateRequest
from langsync.backend.services.locale_paths import FileFormat
from langsync.backend.services.translation import PassthroughTranslator
from langsync.backend.services.updater import process_language_update

LOG_LEVEL_ENV = "LANGSYNC_LOG_LEVEL"


def _configure_logging() -> None:
    level = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _read_entries(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _cmd_modules(args: argparse.Namespace) -> int:
    path = args.catalog or catalog_path(load_settings())
    try:
        catalog = load_catalog(path)
    except CatalogUnavailable as error:
        print(error, file=sys.stderr)
        return 1

    for name in catalog.module_names():
        entry = catalog[name]
        print(name)
        for file_format in FileFormat:
            for file_name in entry.files_for(file_format.value):
                print(f"  [{file_format.value}] {file_name}")
    return 0


def _cmd_update(args: argparse.Namespace) -> int:
    try:
        text = _read_entries(args.entries)
    except OSError as error:
        print(f"Could not read entries: {error}", file=sys.stderr)
        return 1

    parsed = parse_entry_text(text)
    if parsed.errors:
        print("Invalid key-value pairs:", file=sys.stderr)
        for error in parsed.errors:
            print(f"  {error}", file=sys.stderr)
        return 1
    if not parsed.entries:
        print("No valid key-value pairs found", file=sys.stderr)
        return 1

    translator = PassthroughTranslator() if args.no_translate else None

    try:
        result = process_language_update(
            args.file,
            parsed.entries,
            args.type,
            settings=load_settings(),
            translator=translator,
        )
    except BadUpdateRequest as error:
        print(error, file=sys.stderr)
        return 1

    print(result.message)
    for line in result.details:
        print(f"  - {line}")
    return 0 if result.success else 1


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="langsync",
        description="Append entries to a source-locale file and propagate translations.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    modules = subparsers.add_parser("modules", help="List modules and their language files")
    modules.add_argument("--catalog", type=Path, help="Catalogue file (defaults to settings)")
    modules.set_defaults(handler=_cmd_modules)

    update = subparsers.add_parser("update", help="Append entries to a file and its locales")
    update.add_argument("file", help="Path of the source-locale language file")
    update.add_argument(
        "--type",
        choices=[item.value for item in FileFormat],
        default=FileFormat.PROPERTIES.value,
        help="Language file format (default: properties)",
    )
    update.add_argument(
        "--entries",
        default="-",
        help="File holding key=value lines, or '-' for stdin (default)",
    )
    update.add_argument(
        "--no-translate",
        action="store_true",
        help="Copy the source values to every locale without translating",
    )
    update.set_defaults(handler=_cmd_update)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the ``langsync`` console script."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)
    _configure_logging()

    try:
        return args.handler(args)
    except (FileNotFoundError, ConfigurationError) as error:
        print(f"Failed to load settings: {error}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
