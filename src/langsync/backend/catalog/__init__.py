"""Module catalogue parsing helpers."""

from .parser import (
    CatalogUnavailable,
    ModuleCatalog,
    ModuleEntry,
    is_sentinel,
    load_catalog,
    parse_catalog,
)

__all__ = [
    "CatalogUnavailable",
    "ModuleCatalog",
    "ModuleEntry",
    "is_sentinel",
    "load_catalog",
    "parse_catalog",
]
