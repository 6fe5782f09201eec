"""Unit tests for the module catalogue parser."""

from __future__ import annotations

from pathlib import Path

import pytest

from langsync.backend.catalog import (
    CatalogUnavailable,
    ModuleEntry,
    is_sentinel,
    load_catalog,
    parse_catalog,
)
from langsync.backend.catalog.parser import NO_JAVASCRIPT_FILES, NO_PROPERTIES_FILES


def test_parse_catalog_reads_paths_and_sentinels() -> None:
    text = "\n".join(
        [
            "moduleName=M",
            "Properties Files:",
            "./M/i18n/en/messages.properties",
            "JavaScript Files:",
            "./M (No JavaScript language files found)",
        ]
    )

    catalog = parse_catalog(text)

    assert catalog.as_dict() == {
        "M": {
            "properties": ["./M/i18n/en/messages.properties"],
            "javascript": [NO_JAVASCRIPT_FILES],
        }
    }


def test_parse_catalog_handles_labeled_single_files() -> None:
    text = """
moduleName=checkout
Properties Files:
./checkout Properties File: ./checkout/en/cart.properties
JavaScript Files:
/home/dev/checkout JavaScript File: /home/dev/checkout/lang/en/en_cart.js
"""

    entry = parse_catalog(text)["checkout"]

    assert entry.properties_files == ("./checkout/en/cart.properties",)
    assert entry.javascript_files == ("/home/dev/checkout/lang/en/en_cart.js",)


def test_labeled_entries_ignore_current_section() -> None:
    text = """
moduleName=admin
JavaScript Files:
./admin Properties File: ./admin/en/admin.properties
"""

    entry = parse_catalog(text)["admin"]

    assert entry.properties_files == ("./admin/en/admin.properties",)
    assert entry.javascript_files == ()


def test_parse_catalog_ignores_lines_without_context() -> None:
    text = """
./orphan/en/messages.properties
Properties Files:
./still/orphan.properties
moduleName=core
Properties Files:
core/en/relative-without-marker.properties
# not a comment convention, just noise
./core/en/core.properties
"""

    catalog = parse_catalog(text)

    assert catalog.module_names() == ["core"]
    assert catalog["core"].properties_files == ("./core/en/core.properties",)


def test_parse_catalog_trims_whitespace_and_sorts_names() -> None:
    text = "  moduleName=zeta  \n Properties Files: \n   ./zeta/en/z.properties  \nmoduleName=alpha\n"

    catalog = parse_catalog(text)

    assert catalog.module_names() == ["alpha", "zeta"]
    assert catalog["zeta"].properties_files == ("./zeta/en/z.properties",)
    assert catalog["alpha"] == ModuleEntry()


def test_sentinel_and_real_paths_never_mix() -> None:
    text = """
moduleName=mixed
Properties Files:
./mixed (No properties files - uses JSON format)
./mixed/en/late.properties
JavaScript Files:
./mixed/lang/en/en_a.js
./mixed (No JavaScript language files found)
"""

    entry = parse_catalog(text)["mixed"]

    assert entry.properties_files == ("./mixed/en/late.properties",)
    assert entry.javascript_files == (NO_JAVASCRIPT_FILES,)


def test_redeclared_module_starts_fresh() -> None:
    text = """
moduleName=dup
Properties Files:
./dup/en/first.properties
moduleName=dup
Properties Files:
./dup/en/second.properties
"""

    entry = parse_catalog(text)["dup"]

    assert entry.properties_files == ("./dup/en/second.properties",)


def test_empty_catalog_is_valid() -> None:
    catalog = parse_catalog("")

    assert len(catalog) == 0
    assert catalog.as_dict() == {}
    assert catalog.get("missing") is None


def test_catalog_is_read_only() -> None:
    catalog = parse_catalog("moduleName=a\n")

    with pytest.raises(TypeError):
        catalog.modules["b"] = ModuleEntry()  # type: ignore[index]


def test_is_sentinel() -> None:
    assert is_sentinel(NO_PROPERTIES_FILES)
    assert is_sentinel(NO_JAVASCRIPT_FILES)
    assert not is_sentinel("./a/en/a.properties")


def test_files_for_section() -> None:
    entry = ModuleEntry(properties_files=("./p",), javascript_files=("./j",))

    assert entry.files_for("properties") == ("./p",)
    assert entry.files_for("javascript") == ("./j",)
    with pytest.raises(KeyError):
        entry.files_for("json")


def test_load_catalog_reads_file(tmp_path: Path) -> None:
    catalog_file = tmp_path / "catalog.txt"
    catalog_file.write_text("moduleName=a\nProperties Files:\n./a/en/a.properties\n", encoding="utf-8")

    catalog = load_catalog(catalog_file)

    assert catalog["a"].properties_files == ("./a/en/a.properties",)


def test_load_catalog_missing_file(tmp_path: Path) -> None:
    with pytest.raises(CatalogUnavailable):
        load_catalog(tmp_path / "absent.txt")
