"""Append new entries to language files without disturbing existing content."""

from __future__ import annotations

import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Mapping

from .errors import FileFormatError
from .locale_paths import FileFormat

logger = logging.getLogger(__name__)

SCRIPT_CLOSING_MARKER = "};"

_UNESCAPED_QUOTE = re.compile(r'(?<!\\)"')


def _read_text(path: Path) -> str:
    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileFormatError(f"Unable to read {path}: {exc}") from exc


def _write_atomic(path: Path, content: str) -> None:
    """Replace ``path`` with ``content`` via a temporary sibling file."""

    try:
        mode = path.stat().st_mode & 0o777
    except OSError:
        mode = None

    handle = tempfile.NamedTemporaryFile(
        "w",
        encoding="utf-8",
        newline="",
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
        delete=False,
    )
    temp_name = handle.name
    try:
        with handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        if mode is not None:
            os.chmod(temp_name, mode)
        os.replace(temp_name, path)
    except OSError:
        Path(temp_name).unlink(missing_ok=True)
        raise


def _summary(path: Path, entries: Mapping[str, str]) -> str:
    return f"Updated: {path.name} with {len(entries)} entries"


def render_properties_entries(content: str, entries: Mapping[str, str]) -> str:
    """Return ``content`` with one ``key=value`` line appended per entry.

    New lines reuse the file's line ending: CRLF when the existing content
    contains one, LF otherwise.
    """

    newline = "\r\n" if "\r\n" in content else "\n"
    existing = content.rstrip("\r\n")
    head = f"{existing}{newline}" if existing else ""
    additions = "".join(f"{key}={value}{newline}" for key, value in entries.items())
    return head + additions


def _quote_script_value(value: str) -> str:
    return '"' + _UNESCAPED_QUOTE.sub(r'\\"', value) + '"'


def render_script_entries(content: str, entries: Mapping[str, str]) -> str:
    """Insert ``entries`` before the last ``};`` of an object-literal file."""

    marker_index = content.rfind(SCRIPT_CLOSING_MARKER)
    if marker_index == -1:
        raise FileFormatError(
            f"Invalid JavaScript file format: closing '{SCRIPT_CLOSING_MARKER}' not found"
        )

    before = content[:marker_index].rstrip()
    trailing = content[marker_index + len(SCRIPT_CLOSING_MARKER):]

    separator = "\n" if before.endswith((",", "{")) else ",\n"
    additions = ",\n".join(
        f"  {key}:{_quote_script_value(value)}" for key, value in entries.items()
    )
    return f"{before}{separator}{additions}\n{SCRIPT_CLOSING_MARKER}{trailing}"


def append_properties_entries(path: Path | str, entries: Mapping[str, str]) -> str:
    """Append ``entries`` to a ``.properties`` file and return a summary line."""

    target = Path(path)
    updated = render_properties_entries(_read_text(target), entries)
    _write_atomic(target, updated)
    logger.debug("Appended %d properties entries to %s", len(entries), target)
    return _summary(target, entries)


def append_script_entries(path: Path | str, entries: Mapping[str, str]) -> str:
    """Append ``entries`` to a JavaScript object-literal file and return a summary line."""

    target = Path(path)
    content = _read_text(target)
    try:
        updated = render_script_entries(content, entries)
    except FileFormatError as exc:
        raise FileFormatError(f"{exc} in {target}") from exc
    _write_atomic(target, updated)
    logger.debug("Appended %d script entries to %s", len(entries), target)
    return _summary(target, entries)


def append_entries(
    path: Path | str, entries: Mapping[str, str], file_format: FileFormat | str
) -> str:
    """Dispatch to the mutator matching ``file_format``."""

    if FileFormat.parse(file_format) is FileFormat.SCRIPT_OBJECT:
        return append_script_entries(path, entries)
    return append_properties_entries(path, entries)


__all__ = [
    "SCRIPT_CLOSING_MARKER",
    "append_entries",
    "append_properties_entries",
    "append_script_entries",
    "render_properties_entries",
    "render_script_entries",
]
