from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from patterndetect._compat.toml import load_toml


def _release_version() -> str:
    try:
        return version("patterndetect")
    except PackageNotFoundError:
        pyproject = Path(__file__).resolve().parents[3] / "pyproject.toml"
        if not pyproject.exists():
            return "0.0.0"
        project = load_toml(pyproject).get("project", {})
        project_version = project.get("version") if isinstance(project, dict) else None
        return project_version if isinstance(project_version, str) else "0.0.0"


SCHEMA_VERSION = _release_version()
