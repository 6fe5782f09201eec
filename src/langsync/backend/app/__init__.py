"""Application factory for LangSync backend services."""

from __future__ import annotations

from warnings import warn

from flask import Flask, jsonify
from werkzeug.exceptions import BadRequest

from langsync.backend.config.schema import SyncSettings
from langsync.backend.config.settings import catalog_path, load_settings
from langsync.backend.services.translation import TextTranslator
from langsync.backend.services.updater import LanguageFileUpdater
from langsync.backend.version import get_project_version

from .http import problem_response
from .routes import register_routes
from .state import get_state, init_state


def create_app(
    settings: SyncSettings | None = None,
    translator: TextTranslator | None = None,
) -> Flask:
    """Create and configure the Flask application instance.

    ``settings`` defaults to the cached on-disk settings; ``translator``
    defaults to the command translator described by those settings.
    """

    app = Flask(__name__)

    settings = settings or load_settings()
    if not catalog_path(settings).is_file():
        warn(
            f"Module catalogue {settings.catalog_file} not found; /api/v1/modules will fail.",
            stacklevel=1,
        )

    init_state(app, settings, LanguageFileUpdater(settings, translator))
    register_routes(app)

    @app.route("/health", methods=["GET"])
    def health_check():
        """Simple health check endpoint for infrastructure monitoring."""

        state = get_state()
        payload = {
            "status": "ok",
            "version": get_project_version(),
            "source_locale": state.settings.source_locale,
            "locales": list(state.settings.locale_codes),
        }
        return jsonify(payload)

    @app.errorhandler(BadRequest)
    def handle_bad_request(error: BadRequest):
        """Return consistent JSON responses for malformed payloads."""

        message = error.description or "Invalid request"
        return problem_response("bad_request", status=400, message=message).to_response()

    @app.errorhandler(ValueError)
    def handle_value_error(error: ValueError):
        """Gracefully surface domain validation errors to clients."""

        return problem_response(
            "validation_error", status=400, message=str(error)
        ).to_response()

    return app


__all__ = ["create_app"]
