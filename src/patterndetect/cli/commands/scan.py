from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from pathlib import Path
from typing import cast

from tqdm import tqdm

from patterndetect.core.config_loader import load_config
from patterndetect.core.pipeline import analyze_patterns
from patterndetect.core.types import DetectionProgress
from patterndetect.reporting.json_reporter import JsonReporter
from patterndetect.reporting.text_reporter import TextReporter


@dataclass(frozen=True, slots=True)
class ScanOptions:
    paths: list[str]
    fmt: str
    out_path: str
    min_similarity: float | None = None
    min_lines: int | None = None
    max_blocks: int | None = None
    batch_size: int | None = None
    approx: bool | None = None
    min_shared_tokens: int | None = None
    max_candidates_per_block: int | None = None
    fast_mode: bool | None = None
    max_comparisons: int | None = None
    unlimited_comparisons: bool = False
    include_globs: list[str] | None = None
    exclude_globs: list[str] | None = None
    show_progress: bool = True


def run_scan(options: ScanOptions) -> None:
    detection: dict[str, object] = {
        "min_similarity": options.min_similarity,
        "min_lines": options.min_lines,
        "max_blocks": options.max_blocks,
        "batch_size": options.batch_size,
        "approx": options.approx,
        "min_shared_tokens": options.min_shared_tokens,
        "max_candidates_per_block": options.max_candidates_per_block,
        "fast_mode": options.fast_mode,
        "max_comparisons": options.max_comparisons,
    }
    overrides = _clean_overrides({"detection": detection})
    config = load_config(Path.cwd(), overrides)
    if options.unlimited_comparisons:
        config = replace(config, detection=replace(config.detection, max_comparisons=None))
    include_globs, exclude_globs = merge_globs(
        config.include_globs,
        config.exclude_globs,
        options.include_globs or [],
        options.exclude_globs or [],
    )
    config = replace(config, include_globs=include_globs, exclude_globs=exclude_globs)

    bar = tqdm(total=None, desc="patterndetect", unit="block") if options.show_progress else None
    try:
        result = analyze_patterns(options.paths, config, progress=_progress_bar(bar))
    finally:
        if bar is not None:
            bar.close()

    if options.fmt == "json":
        JsonReporter().write(result, options.out_path)
    else:
        TextReporter().write(result, options.out_path)


def _progress_bar(bar: tqdm | None) -> Callable[[DetectionProgress], None] | None:
    if bar is None:
        return None

    def update(progress: DetectionProgress) -> None:
        if bar.total is None:
            bar.total = progress.total_blocks
        bar.n = progress.blocks_processed
        if progress.percent is not None:
            bar.set_postfix(comparisons=f"{progress.percent:.1f}%")
        else:
            bar.set_postfix(comparisons=progress.comparisons)
        bar.refresh()

    return update


def _clean_overrides(overrides: dict[str, object]) -> dict[str, object]:
    cleaned: dict[str, object] = {}
    for key, value in overrides.items():
        if isinstance(value, dict):
            value_dict = cast(dict[str, object], value)
            filtered = {k: v for k, v in value_dict.items() if v is not None}
            if filtered:
                cleaned[key] = filtered
        elif value is not None:
            cleaned[key] = value
    return cleaned


def merge_globs(
    base_include: list[str],
    base_exclude: list[str],
    cli_include: list[str],
    cli_exclude: list[str],
) -> tuple[list[str], list[str]]:
    include = _dedupe(base_include + cli_include)
    exclude = _dedupe(base_exclude + cli_exclude)

    # CLI entries override conflicting pyproject entries.
    for pattern in cli_include:
        exclude = [value for value in exclude if value != pattern]
    for pattern in cli_exclude:
        include = [value for value in include if value != pattern]
    return include, exclude


def _dedupe(values: list[str]) -> list[str]:
    return list(dict.fromkeys(values))
