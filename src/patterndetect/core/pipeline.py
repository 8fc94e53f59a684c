from __future__ import annotations

import time

from patterndetect.core.config import PatternDetectConfig
from patterndetect.core.types import AnalysisResult
from patterndetect.engines.detector import ProgressCallback, detect_duplicate_patterns
from patterndetect.io.fs import collect_files
from patterndetect.reporting.issues import build_file_analyses


def analyze_patterns(
    paths: list[str],
    config: PatternDetectConfig,
    progress: ProgressCallback | None = None,
) -> AnalysisResult:
    timing: dict[str, float] = {}

    start = time.perf_counter()
    files = collect_files(paths, config.include_globs, config.exclude_globs)
    timing["collect_files"] = time.perf_counter() - start

    start = time.perf_counter()
    report = detect_duplicate_patterns(files, config.detection, progress=progress)
    timing["detect"] = time.perf_counter() - start

    analyses = build_file_analyses([source.path for source in files], report)
    return AnalysisResult(
        analyses=analyses,
        report=report,
        file_count=len(files),
        timing=timing,
    )
