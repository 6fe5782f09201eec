"""Pydantic models describing the synchronisation settings schema."""

from __future__ import annotations

import re
from typing import Any, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing_extensions import Self

_LOCALE_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


def _check_locale_code(value: str) -> str:
    code = value.strip()
    if not _LOCALE_PATTERN.match(code):
        raise ConfigurationError(f"Invalid locale code: {value!r}")
    return code


class LocaleConfig(ImmutableModel):
    """A configured target locale and the translator code it maps to.

    ``translator`` is ``None`` for locales that should receive the source
    text unchanged.
    """

    code: str
    translator: str | None = None

    @field_validator("code")
    @classmethod
    def _validate_code(cls, value: str) -> str:
        return _check_locale_code(value)

    @field_validator("translator", mode="before")
    @classmethod
    def _blank_translator_is_passthrough(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class TranslatorConfig(ImmutableModel):
    """How to invoke the external translation command."""

    command: tuple[str, ...] = ("python3", "translate_argos.py")
    timeout_seconds: float | None = Field(default=None, gt=0)
    pacing_delay_seconds: float = Field(default=0.1, ge=0)

    @field_validator("command", mode="before")
    @classmethod
    def _coerce_command(cls, value: Any) -> Sequence[str]:
        if isinstance(value, str):
            value = value.split()
        if not isinstance(value, Sequence) or not value:
            raise ConfigurationError("Translator command must be a non-empty list")
        return tuple(str(part) for part in value)


class SyncSettings(ImmutableModel):
    """Top-level settings for the language file synchroniser."""

    source_locale: str = "en"
    catalog_file: str = "module_language_files.txt"
    translator: TranslatorConfig = Field(default_factory=TranslatorConfig)
    locales: tuple[LocaleConfig, ...] = ()

    @field_validator("source_locale")
    @classmethod
    def _validate_source_locale(cls, value: str) -> str:
        return _check_locale_code(value)

    @field_validator("locales", mode="before")
    @classmethod
    def _coerce_locales(cls, value: Any) -> Sequence[Any]:
        if value is None:
            return ()
        if isinstance(value, Mapping):
            # Shorthand form: ``{da: da, eslac: es}``
            return tuple(
                {"code": code, "translator": translator}
                for code, translator in value.items()
            )
        return value

    @model_validator(mode="after")
    def _validate_locales(self) -> Self:
        seen: set[str] = set()
        for locale in self.locales:
            if locale.code == self.source_locale:
                raise ConfigurationError(
                    f"Source locale '{self.source_locale}' cannot also be a target locale"
                )
            if locale.code in seen:
                raise ConfigurationError(f"Duplicate locale code: {locale.code}")
            seen.add(locale.code)
        return self

    @property
    def locale_codes(self) -> tuple[str, ...]:
        return tuple(locale.code for locale in self.locales)

    @property
    def translator_codes(self) -> dict[str, str]:
        """Return the locale -> translator code table, omitting pass-through locales."""

        return {
            locale.code: locale.translator
            for locale in self.locales
            if locale.translator is not None
        }


__all__ = [
    "ConfigurationError",
    "ImmutableModel",
    "LocaleConfig",
    "SyncSettings",
    "TranslatorConfig",
]
