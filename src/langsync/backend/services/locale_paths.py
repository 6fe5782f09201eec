"""Derive sibling locale file paths from a source-locale file path."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Iterable

from .errors import LocalePathError


class FileFormat(str, Enum):
    """Supported language file formats, keyed by their wire names."""

    PROPERTIES = "properties"
    SCRIPT_OBJECT = "javascript"

    @classmethod
    def parse(cls, value: "FileFormat | str") -> "FileFormat":
        try:
            return cls(value)
        except ValueError as exc:
            supported = ", ".join(item.value for item in cls)
            raise ValueError(f"Unsupported file type {value!r}; expected one of: {supported}") from exc


def _resolve_properties_path(source: Path, source_locale: str, locale: str) -> Path:
    # Only directory segments are considered; the file name is never rewritten.
    parts = list(source.parts)
    for index, part in enumerate(parts[:-1]):
        if part == source_locale:
            parts[index] = locale
            return Path(*parts)
    raise LocalePathError(
        f"Cannot derive '{locale}' path: {source} has no '{source_locale}' directory segment"
    )


def _resolve_script_path(source: Path, source_locale: str, locale: str) -> Path:
    directory = source.parent
    if directory.name != source_locale:
        raise LocalePathError(
            f"Cannot derive '{locale}' path: {source} is not inside a '{source_locale}' directory"
        )

    prefix = f"{source_locale}_"
    if not source.name.startswith(prefix):
        raise LocalePathError(
            f"Cannot derive '{locale}' path: file name {source.name} lacks the '{prefix}' prefix"
        )

    file_name = f"{locale}_{source.name[len(prefix):]}"
    return directory.parent / locale / file_name


def resolve_locale_path(
    source_path: Path | str,
    file_format: FileFormat | str,
    locale: str,
    *,
    source_locale: str = "en",
) -> Path:
    """Return the candidate path of ``locale``'s copy of ``source_path``.

    The returned file is not guaranteed to exist.
    """

    source = Path(source_path)
    if locale == source_locale:
        return source

    if FileFormat.parse(file_format) is FileFormat.SCRIPT_OBJECT:
        return _resolve_script_path(source, source_locale, locale)
    return _resolve_properties_path(source, source_locale, locale)


def resolve_language_files(
    source_path: Path | str,
    file_format: FileFormat | str,
    locales: Iterable[str],
    *,
    source_locale: str = "en",
) -> dict[str, Path]:
    """Resolve every locale's path, source locale first, in ``locales`` order."""

    files = {source_locale: Path(source_path)}
    for locale in locales:
        files[locale] = resolve_locale_path(
            source_path, file_format, locale, source_locale=source_locale
        )
    return files


__all__ = [
    "FileFormat",
    "resolve_language_files",
    "resolve_locale_path",
]
