"""Pydantic models describing the public API surface."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from langsync.backend.services.locale_paths import FileFormat

__all__ = [
    "LanguageUpdateRequest",
    "format_validation_error",
]


class LanguageUpdateRequest(BaseModel):
    """Entries to append to a source-locale file and its locale siblings."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    file_path: str = Field(..., alias="filePath", min_length=1)
    entries: dict[str, str] = Field(..., min_length=1)
    file_type: FileFormat = Field(..., alias="fileType")

    @field_validator("entries")
    @classmethod
    def _validate_entries(cls, value: dict[str, str]) -> dict[str, str]:
        cleaned: dict[str, str] = {}
        for key, text in value.items():
            key, text = key.strip(), text.strip()
            if not key or not text:
                raise ValueError("entry keys and values must be non-empty")
            if "\n" in key or "\n" in text:
                raise ValueError(f"entry '{key}' must fit on a single line")
            cleaned[key] = text
        return cleaned


def format_validation_error(error: ValidationError) -> str:
    """Return a concise human-readable description of validation issues."""

    messages: list[str] = []
    for issue in error.errors():
        location = ".".join(str(part) for part in issue.get("loc", ()))
        message = issue.get("msg", "Invalid value")
        if location:
            messages.append(f"{location}: {message}")
        else:
            messages.append(message)

    details = "; ".join(messages) if messages else str(error)
    return f"Invalid update payload: {details}"
