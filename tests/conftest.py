"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from langsync.backend.app import create_app  # noqa: E402
from langsync.backend.config.schema import SyncSettings  # noqa: E402

CATALOG_TEMPLATE = """\
moduleName=billing
Properties Files:
{properties}
JavaScript Files:
{javascript}
moduleName=reports
Properties Files:
./reports (No properties files - uses JSON format)
JavaScript Files:
./reports (No JavaScript language files found)
"""


class RecordingTranslator:
    """Translator double that prefixes values with the target locale."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def translate(self, text: str, locale: str) -> str:
        self.calls.append((text, locale))
        return f"[{locale}] {text}"


@pytest.fixture()
def locale_tree(tmp_path: Path) -> dict[str, Path]:
    """Create properties and script files for ``en``, ``fr`` and ``de``.

    ``cf`` is configured but deliberately has no files.
    """

    files: dict[str, Path] = {}
    for locale in ("en", "fr", "de"):
        properties = tmp_path / "billing" / "i18n" / locale / "messages.properties"
        properties.parent.mkdir(parents=True)
        properties.write_text(f"greeting=hello-{locale}\n", encoding="utf-8")
        files[f"{locale}.properties"] = properties

        script = tmp_path / "billing" / "lang" / locale / f"{locale}_billing.js"
        script.parent.mkdir(parents=True)
        script.write_text(f'var {locale}_billing = {{\n  greeting:"hello"\n}};\n', encoding="utf-8")
        files[f"{locale}.js"] = script

    catalog = tmp_path / "module_language_files.txt"
    catalog.write_text(
        CATALOG_TEMPLATE.format(
            properties=files["en.properties"], javascript=files["en.js"]
        ),
        encoding="utf-8",
    )
    files["catalog"] = catalog
    return files


@pytest.fixture()
def sync_settings(locale_tree: dict[str, Path]) -> SyncSettings:
    """Settings with three target locales and no pacing delay."""

    return SyncSettings.model_validate(
        {
            "source_locale": "en",
            "catalog_file": str(locale_tree["catalog"]),
            "translator": {"command": ["translate-text"], "pacing_delay_seconds": 0},
            "locales": [
                {"code": "fr", "translator": "fr"},
                {"code": "de", "translator": "de"},
                {"code": "cf", "translator": "fr"},
            ],
        }
    )


@pytest.fixture()
def translator() -> RecordingTranslator:
    return RecordingTranslator()


@pytest.fixture()
def app(sync_settings: SyncSettings, translator: RecordingTranslator) -> Flask:
    """Return a configured Flask application for integration tests."""

    application = create_app(sync_settings, translator)
    application.config.update(TESTING=True)
    return application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Provide a test client bound to the configured Flask app."""

    return app.test_client()
