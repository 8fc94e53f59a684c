from __future__ import annotations

from dataclasses import dataclass, field

from patterndetect.core.errors import ConfigError

FAST_MODE_MIN_SIMILARITY = 0.40
EXACT_MODE_MIN_SIMILARITY = 0.85


@dataclass(frozen=True, slots=True)
class DetectionConfig:
    # None picks the threshold calibrated for the active similarity mode.
    min_similarity: float | None = None
    min_lines: int = 5
    max_blocks: int = 500
    batch_size: int = 100
    approx: bool = True
    min_shared_tokens: int = 8
    max_candidates_per_block: int = 100
    fast_mode: bool = True
    # None disables the budget; 0 allows no comparisons at all.
    max_comparisons: int | None = 50_000

    @property
    def effective_min_similarity(self) -> float:
        if self.min_similarity is not None:
            return self.min_similarity
        return FAST_MODE_MIN_SIMILARITY if self.fast_mode else EXACT_MODE_MIN_SIMILARITY


@dataclass(frozen=True, slots=True)
class PatternDetectConfig:
    include_globs: list[str] = field(
        default_factory=lambda: [
            "**/*.js",
            "**/*.jsx",
            "**/*.mjs",
            "**/*.cjs",
            "**/*.ts",
            "**/*.tsx",
        ]
    )
    exclude_globs: list[str] = field(
        default_factory=lambda: [
            "**/node_modules/**",
            "**/dist/**",
            "**/build/**",
            "**/.next/**",
            "**/coverage/**",
            "**/.git/**",
        ]
    )
    detection: DetectionConfig = DetectionConfig()


_INT_FIELDS = (
    "min_lines",
    "max_blocks",
    "batch_size",
    "min_shared_tokens",
    "max_candidates_per_block",
)


def validate_config(config: DetectionConfig) -> None:
    for name in _INT_FIELDS:
        value = getattr(config, name)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"{name} must be an integer, got {value!r}")
    if config.max_comparisons is not None and (
        isinstance(config.max_comparisons, bool) or not isinstance(config.max_comparisons, int)
    ):
        raise ConfigError(f"max_comparisons must be an integer, got {config.max_comparisons!r}")
    if config.min_similarity is not None and (
        isinstance(config.min_similarity, bool)
        or not isinstance(config.min_similarity, (int, float))
    ):
        raise ConfigError(f"min_similarity must be a number, got {config.min_similarity!r}")
    if config.min_lines <= 0:
        raise ConfigError("min_lines must be > 0")
    if config.max_blocks <= 0:
        raise ConfigError("max_blocks must be > 0")
    if config.batch_size <= 0:
        raise ConfigError("batch_size must be > 0")
    if config.min_shared_tokens < 0:
        raise ConfigError("min_shared_tokens must be >= 0")
    if config.max_candidates_per_block < 0:
        raise ConfigError("max_candidates_per_block must be >= 0")
    if config.max_comparisons is not None and config.max_comparisons < 0:
        raise ConfigError("max_comparisons must be >= 0")
    if not 0.0 <= config.effective_min_similarity <= 1.0:
        raise ConfigError("min_similarity must be between 0 and 1")
