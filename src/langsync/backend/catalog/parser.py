"""Parser for the module catalogue listing each module's language files.

The catalogue is plain text produced by an external scan of the code base::

    moduleName=billing
    Properties Files:
    ./billing/i18n/en/messages.properties
    JavaScript Files:
    ./billing (No JavaScript language files found)

Parsing is forgiving: unrecognised lines are skipped and the result may be
empty, but it never raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

MODULE_PREFIX = "moduleName="
PROPERTIES_HEADER = "Properties Files:"
JAVASCRIPT_HEADER = "JavaScript Files:"

PROPERTIES_SECTION = "properties"
JAVASCRIPT_SECTION = "javascript"

NO_PROPERTIES_FILES = "No properties files - uses JSON format"
NO_JAVASCRIPT_FILES = "No JavaScript language files found"

_SENTINEL_MARKERS = {
    f"({NO_PROPERTIES_FILES})": (PROPERTIES_SECTION, NO_PROPERTIES_FILES),
    f"({NO_JAVASCRIPT_FILES})": (JAVASCRIPT_SECTION, NO_JAVASCRIPT_FILES),
}
_LABELED_MARKERS = {
    "Properties File:": PROPERTIES_SECTION,
    "JavaScript File:": JAVASCRIPT_SECTION,
}
_PATH_PREFIXES = ("./", "/")

SENTINELS = frozenset({NO_PROPERTIES_FILES, NO_JAVASCRIPT_FILES})


class CatalogUnavailable(OSError):
    """Raised when the catalogue file cannot be read."""


@dataclass(frozen=True)
class ModuleEntry:
    """Language files owned by a single module."""

    properties_files: tuple[str, ...] = ()
    javascript_files: tuple[str, ...] = ()

    def files_for(self, section: str) -> tuple[str, ...]:
        """Return the files listed under ``section`` (``properties`` or ``javascript``)."""

        if section == PROPERTIES_SECTION:
            return self.properties_files
        if section == JAVASCRIPT_SECTION:
            return self.javascript_files
        raise KeyError(section)

    def as_dict(self) -> dict[str, list[str]]:
        return {
            PROPERTIES_SECTION: list(self.properties_files),
            JAVASCRIPT_SECTION: list(self.javascript_files),
        }


@dataclass(frozen=True)
class ModuleCatalog:
    """Immutable mapping of module names to their language files."""

    modules: Mapping[str, ModuleEntry]

    def __len__(self) -> int:
        return len(self.modules)

    def __contains__(self, name: object) -> bool:
        return name in self.modules

    def __getitem__(self, name: str) -> ModuleEntry:
        return self.modules[name]

    def get(self, name: str) -> ModuleEntry | None:
        return self.modules.get(name)

    def module_names(self) -> list[str]:
        """Return module names sorted for display."""

        return sorted(self.modules)

    def as_dict(self) -> dict[str, dict[str, list[str]]]:
        return {name: entry.as_dict() for name, entry in self.modules.items()}


def is_sentinel(value: str) -> bool:
    """Return ``True`` when ``value`` marks a module with no files of a kind."""

    return value in SENTINELS


def _append(files: list[str], value: str) -> None:
    # A real path displaces a previously recorded "no files" marker.
    if files and is_sentinel(files[0]):
        files.clear()
    files.append(value)


def parse_catalog(text: str) -> ModuleCatalog:
    """Parse catalogue ``text`` into a :class:`ModuleCatalog`."""

    modules: dict[str, dict[str, list[str]]] = {}
    current_module = ""
    current_section = ""

    for raw_line in text.splitlines():
        line = raw_line.strip()

        if line.startswith(MODULE_PREFIX):
            current_module = line[len(MODULE_PREFIX):]
            if current_module:
                modules[current_module] = {PROPERTIES_SECTION: [], JAVASCRIPT_SECTION: []}
            continue
        if line == PROPERTIES_HEADER:
            current_section = PROPERTIES_SECTION
            continue
        if line == JAVASCRIPT_HEADER:
            current_section = JAVASCRIPT_SECTION
            continue

        if not line.startswith(_PATH_PREFIXES) or not current_module or not current_section:
            continue

        entry = modules[current_module]

        sentinel = next(
            (value for marker, value in _SENTINEL_MARKERS.items() if marker in line),
            None,
        )
        if sentinel is not None:
            section, label = sentinel
            entry[section] = [label]
            continue

        labeled_section = next(
            (section for marker, section in _LABELED_MARKERS.items() if marker in line),
            None,
        )
        if labeled_section is not None:
            _, _, path = line.partition(": ")
            if path:
                _append(entry[labeled_section], path)
            continue

        _append(entry[current_section], line)

    return ModuleCatalog(
        modules=MappingProxyType(
            {
                name: ModuleEntry(
                    properties_files=tuple(files[PROPERTIES_SECTION]),
                    javascript_files=tuple(files[JAVASCRIPT_SECTION]),
                )
                for name, files in modules.items()
            }
        )
    )


def load_catalog(path: Path | str) -> ModuleCatalog:
    """Read and parse the catalogue stored at ``path``."""

    catalog_file = Path(path)
    try:
        text = catalog_file.read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogUnavailable(f"Could not read module catalogue {catalog_file}: {exc}") from exc
    return parse_catalog(text)


__all__ = [
    "CatalogUnavailable",
    "JAVASCRIPT_SECTION",
    "ModuleCatalog",
    "ModuleEntry",
    "NO_JAVASCRIPT_FILES",
    "NO_PROPERTIES_FILES",
    "PROPERTIES_SECTION",
    "is_sentinel",
    "load_catalog",
    "parse_catalog",
]
