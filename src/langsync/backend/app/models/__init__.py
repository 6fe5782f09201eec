"""Typed request/response models shared by the HTTP routes."""

from .api import LanguageUpdateRequest, format_validation_error

__all__ = ["LanguageUpdateRequest", "format_validation_error"]
