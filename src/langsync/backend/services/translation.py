"""Adapter around the external translation command.

The command is invoked as ``<command...> <text> <translator-code>`` and must
print the translation on stdout as UTF-8 and exit with status 0. Any failure
falls back to the untranslated text so a batch update never aborts on
translation.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Callable, Mapping, Protocol, Sequence

from .errors import TranslationFailure

logger = logging.getLogger(__name__)

Runner = Callable[..., subprocess.CompletedProcess]


class TextTranslator(Protocol):
    """Anything able to translate one string into one locale."""

    def translate(self, text: str, locale: str) -> str: ...


class CommandTranslator:
    """Translate text by running an external command once per string."""

    def __init__(
        self,
        locale_map: Mapping[str, str],
        command: Sequence[str],
        *,
        timeout: float | None = None,
        runner: Runner = subprocess.run,
    ) -> None:
        if not command:
            raise ValueError("command must contain at least the executable")
        self._locale_map = dict(locale_map)
        self._command = tuple(command)
        self._timeout = timeout
        self._runner = runner

    def translator_code(self, locale: str) -> str | None:
        return self._locale_map.get(locale)

    def _invoke(self, text: str, code: str) -> str:
        try:
            completed = self._runner(
                [*self._command, text, code],
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="strict",
                timeout=self._timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise TranslationFailure(f"timed out after {exc.timeout}s") from exc
        except UnicodeDecodeError as exc:
            raise TranslationFailure(f"translator output is not valid UTF-8: {exc}") from exc
        except (OSError, subprocess.SubprocessError, ValueError) as exc:
            raise TranslationFailure(f"could not start translator: {exc}") from exc

        if completed.returncode != 0:
            stderr = (completed.stderr or "").strip()
            raise TranslationFailure(f"exit status {completed.returncode}: {stderr}")

        translated = (completed.stdout or "").strip()
        if not translated:
            raise TranslationFailure("translator produced no output")
        return translated

    def translate(self, text: str, locale: str) -> str:
        """Return ``text`` translated for ``locale``, or ``text`` itself on failure."""

        code = self.translator_code(locale)
        if not code:
            return text

        try:
            return self._invoke(text, code)
        except TranslationFailure as exc:
            logger.error("Translation failed for %r to %s: %s", text, locale, exc)
            return text


class PassthroughTranslator:
    """Translator that leaves every string untouched."""

    def translate(self, text: str, locale: str) -> str:
        return text


__all__ = ["CommandTranslator", "PassthroughTranslator", "TextTranslator"]
