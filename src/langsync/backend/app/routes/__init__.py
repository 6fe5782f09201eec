"""Blueprint registrations for application routes."""

from flask import Flask

from .language_files import blueprint as language_files_blueprint
from .modules import blueprint as modules_blueprint


def register_routes(app: Flask) -> None:
    """Register all Flask blueprints with the provided application."""

    app.register_blueprint(modules_blueprint)
    app.register_blueprint(language_files_blueprint)
