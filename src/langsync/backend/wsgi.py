"""WSGI entrypoint for serving the LangSync backend behind Passenger or gunicorn."""

from langsync.backend.app import create_app

application = create_app()
