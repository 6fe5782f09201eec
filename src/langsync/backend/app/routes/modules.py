"""Expose the module catalogue to the file picker UI."""

from __future__ import annotations

import logging
from typing import Any

from flask import Blueprint, Response, jsonify

from langsync.backend.app.http import disable_caching, problem_response
from langsync.backend.app.state import get_state
from langsync.backend.catalog import CatalogUnavailable, load_catalog
from langsync.backend.config.settings import catalog_path

blueprint = Blueprint("modules", __name__, url_prefix="/api/v1/modules")

logger = logging.getLogger(__name__)

_CATALOG_ERROR = "Could not read module data file"


@blueprint.get("")
def list_modules() -> tuple[Any, int]:
    """Return the parsed catalogue with module names sorted for display."""

    path = catalog_path(get_state().settings)
    try:
        catalog = load_catalog(path)
    except CatalogUnavailable as exc:
        logger.error("%s", exc)
        return problem_response(
            "catalog_unavailable", status=500, message=_CATALOG_ERROR
        ).to_response()

    response = jsonify({"modules": catalog.as_dict(), "module_names": catalog.module_names()})
    return disable_caching(response), 200


@blueprint.get("/raw")
def get_raw_catalogue() -> Response | tuple[Any, int]:
    """Return the catalogue text verbatim for clients that parse it themselves."""

    path = catalog_path(get_state().settings)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Could not read module catalogue %s: %s", path, exc)
        return problem_response(
            "catalog_unavailable", status=500, message=_CATALOG_ERROR
        ).to_response()

    return disable_caching(Response(text, mimetype="text/plain"))


__all__ = ["blueprint"]
