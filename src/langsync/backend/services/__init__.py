"""Service-layer helpers for the LangSync backend."""

from .entry_parser import ParsedEntries, parse_entry_text
from .errors import BadUpdateRequest, FileFormatError, LocalePathError, TranslationFailure
from .locale_paths import FileFormat, resolve_language_files, resolve_locale_path
from .mutators import append_entries, append_properties_entries, append_script_entries
from .translation import CommandTranslator, PassthroughTranslator, TextTranslator
from .updater import (
    LanguageFileUpdater,
    LocaleOutcome,
    OutcomeStatus,
    UpdateResult,
    process_language_update,
)

__all__ = [
    "BadUpdateRequest",
    "CommandTranslator",
    "FileFormat",
    "FileFormatError",
    "LanguageFileUpdater",
    "LocaleOutcome",
    "LocalePathError",
    "OutcomeStatus",
    "ParsedEntries",
    "PassthroughTranslator",
    "TextTranslator",
    "TranslationFailure",
    "UpdateResult",
    "append_entries",
    "append_properties_entries",
    "append_script_entries",
    "parse_entry_text",
    "process_language_update",
    "resolve_language_files",
    "resolve_locale_path",
]
