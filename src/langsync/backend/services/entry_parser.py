"""Parse ``key=value`` entry text typed by a user into an entry mapping."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ParsedEntries:
    entries: dict[str, str] = field(default_factory=dict)
    errors: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors and bool(self.entries)


def parse_entry_text(text: str) -> ParsedEntries:
    """Split ``text`` into entries, collecting one error per malformed line.

    Blank lines and lines starting with ``#`` are ignored. The value is
    everything after the first ``=``; a repeated key keeps the last value.
    """

    entries: dict[str, str] = {}
    errors: list[str] = []

    for number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        key, separator, value = line.partition("=")
        if not separator or not key.strip():
            errors.append(f"Line {number}: Missing '=' separator")
            continue

        key, value = key.strip(), value.strip()
        if not value:
            errors.append(f"Line {number}: Invalid format")
            continue

        entries[key] = value

    return ParsedEntries(entries=entries, errors=tuple(errors))


__all__ = ["ParsedEntries", "parse_entry_text"]
