from __future__ import annotations

from pathlib import Path
from typing import Any


def load_toml(path: Path) -> dict[str, Any]:
    try:
        import tomllib as toml_module
    except ModuleNotFoundError:  # pragma: no cover - Python < 3.11
        import tomli as toml_module
    with path.open("rb") as handle:
        return toml_module.load(handle)
