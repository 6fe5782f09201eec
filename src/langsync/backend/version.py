"""Report the LangSync version from package metadata or ``pyproject.toml``."""

from __future__ import annotations

from functools import lru_cache
from importlib import metadata
from pathlib import Path
from typing import Final

DISTRIBUTION: Final = "langsync"
PYPROJECT: Final = Path(__file__).resolve().parents[3] / "pyproject.toml"


@lru_cache(maxsize=1)
def get_project_version() -> str:
    """Return the installed distribution version.

    Source checkouts without an install fall back to the ``[project]`` table
    of ``pyproject.toml``.
    """

    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return read_pyproject_version(PYPROJECT)


def read_pyproject_version(path: Path) -> str:
    if not path.exists():  # pragma: no cover - repository invariant
        raise RuntimeError(f"Unable to locate project metadata at {path}")

    in_project = False
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.split("#", 1)[0].strip()
        if line.startswith("["):
            in_project = line == "[project]"
            continue
        key, _, value = line.partition("=")
        if in_project and key.strip() == "version":
            version = value.strip().strip("\"'")
            if version:
                return version

    raise RuntimeError(f"No project version declared in {path}")


__all__ = ["get_project_version", "read_pyproject_version"]
