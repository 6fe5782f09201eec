"""REST endpoints for selecting and updating language files."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from http import HTTPStatus
from typing import Any

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from langsync.backend.app.http import problem_response
from langsync.backend.app.models import LanguageUpdateRequest, format_validation_error
from langsync.backend.app.state import get_state
from langsync.backend.services.errors import BadUpdateRequest
from langsync.backend.services.updater import MISSING_PARAMETERS_MESSAGE

blueprint = Blueprint("language_files", __name__, url_prefix="/api/v1")

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("filePath", "entries", "fileType")


def _bad_update(message: str) -> tuple[Any, int]:
    return jsonify({"success": False, "message": message}), HTTPStatus.BAD_REQUEST


@blueprint.post("/select-file")
def select_file() -> tuple[Any, int]:
    """Record the file a user picked in the UI."""

    payload = request.get_json(silent=True) or {}
    file_path = payload.get("filePath") if isinstance(payload, Mapping) else None
    if not file_path:
        return problem_response(
            "bad_request", status=HTTPStatus.BAD_REQUEST, message="No file path provided"
        ).to_response()

    logger.info("Selected file path: %s", file_path)
    return jsonify({"success": True, "message": f"File path logged: {file_path}"}), HTTPStatus.OK


@blueprint.post("/language-files")
def update_language_files() -> tuple[Any, int]:
    """Append entries to the source file and propagate them to every locale."""

    payload = request.get_json(silent=True)
    if not isinstance(payload, Mapping) or any(not payload.get(name) for name in _REQUIRED_FIELDS):
        return _bad_update(MISSING_PARAMETERS_MESSAGE)

    try:
        update = LanguageUpdateRequest.model_validate(payload)
    except ValidationError as exc:
        return _bad_update(format_validation_error(exc))

    logger.info("Processing language update for %s file: %s", update.file_type.value, update.file_path)
    logger.info("Entries to add: %s", list(update.entries))

    try:
        result = get_state().updater.run(update.file_path, update.entries, update.file_type)
    except BadUpdateRequest as exc:
        return _bad_update(str(exc))

    if result.success:
        logger.info("Language files updated: %s", result.details)
    else:
        logger.warning("Failed to update language files: %s", result.message)

    return jsonify(result.as_dict()), HTTPStatus.OK


__all__ = ["blueprint"]
