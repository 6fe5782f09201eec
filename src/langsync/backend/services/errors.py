"""Exceptions raised by the language file synchronisation services."""

from __future__ import annotations


class BadUpdateRequest(ValueError):
    """Raised when an update request is missing fields or carries invalid ones."""


class LocalePathError(ValueError):
    """Raised when a sibling locale path cannot be derived from a source path."""


class FileFormatError(ValueError):
    """Raised when a language file cannot be read or lacks its expected structure."""


class TranslationFailure(RuntimeError):
    """Raised internally when the external translation command faults."""


__all__ = [
    "BadUpdateRequest",
    "FileFormatError",
    "LocalePathError",
    "TranslationFailure",
]
