from __future__ import annotations

from collections.abc import Callable
from dataclasses import fields, replace
from pathlib import Path
from typing import Any

from patterndetect._compat.toml import load_toml
from patterndetect.core.config import DetectionConfig, PatternDetectConfig
from patterndetect.core.errors import ConfigError

_DETECTION_FIELDS = frozenset(f.name for f in fields(DetectionConfig))

# TOML has no null, so the unlimited budget is spelled with a sentinel.
UNLIMITED = "unlimited"


def load_config(root: Path, overrides: dict[str, Any] | None = None) -> PatternDetectConfig:
    overrides = overrides or {}
    config = PatternDetectConfig()
    pyproject = root / "pyproject.toml"
    if pyproject.exists():
        data = load_toml(pyproject)
        tool_cfg: dict[str, Any] = data.get("tool", {}).get("patterndetect", {})
        config = _apply_config(config, tool_cfg)
    return _apply_config(config, overrides)


def _apply_config(config: PatternDetectConfig, cfg: dict[str, Any]) -> PatternDetectConfig:
    if not cfg:
        return config
    if "include_globs" in cfg:
        config = replace(config, include_globs=_globs("include_globs", cfg["include_globs"]))
    if "exclude_globs" in cfg:
        config = replace(config, exclude_globs=_globs("exclude_globs", cfg["exclude_globs"]))
    if "detection" in cfg:
        d = dict(cfg["detection"])
        unknown = sorted(set(d) - _DETECTION_FIELDS)
        if unknown:
            raise ConfigError(f"Unknown detection settings: {', '.join(unknown)}")
        converted = {key: _CONVERTERS[key](key, value) for key, value in d.items()}
        config = replace(config, detection=replace(config.detection, **converted))
    return config


def _globs(key: str, value: Any) -> list[str]:
    if isinstance(value, str) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key} must be a list of strings")
    return list(value)


def _as_int(key: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{key} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{key} must be an integer, got {value!r}") from exc


def _as_bool(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be true or false, got {value!r}")
    return value


def _as_similarity(key: str, value: Any) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ConfigError(f"{key} must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{key} must be a number, got {value!r}") from exc


def _as_budget(key: str, value: Any) -> int | None:
    if value is None or value == UNLIMITED:
        return None
    budget = _as_int(key, value)
    return None if budget == -1 else budget


_CONVERTERS: dict[str, Callable[[str, Any], Any]] = {
    "min_similarity": _as_similarity,
    "min_lines": _as_int,
    "max_blocks": _as_int,
    "batch_size": _as_int,
    "approx": _as_bool,
    "min_shared_tokens": _as_int,
    "max_candidates_per_block": _as_int,
    "fast_mode": _as_bool,
    "max_comparisons": _as_budget,
}
