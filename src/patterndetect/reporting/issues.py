from __future__ import annotations

from patterndetect.core.types import (
    DetectionReport,
    DuplicateMatch,
    FileAnalysis,
    Issue,
    PatternType,
    Severity,
)

SUGGESTIONS: dict[PatternType, str] = {
    "api-handler": "Extract common middleware or create a base handler class",
    "validator": "Consolidate validation logic into shared schema validators (Zod/Yup)",
    "utility": "Move to a shared utilities file and reuse across modules",
    "class-method": "Consider inheritance or composition to share behavior",
    "component": "Extract shared logic into a custom hook or HOC",
    "function": "Extract into a shared helper function",
    "unknown": "Extract common logic into a reusable module",
}


def severity_for(similarity: float) -> Severity:
    if similarity > 0.95:
        return "critical"
    if similarity > 0.9:
        return "major"
    return "minor"


def refactoring_suggestion(pattern_type: PatternType, similarity: float) -> str:
    if similarity > 0.95:
        urgency = " (CRITICAL: Nearly identical code)"
    elif similarity > 0.9:
        urgency = " (HIGH: Very similar, refactor soon)"
    else:
        urgency = ""
    return SUGGESTIONS[pattern_type] + urgency


def issue_for(match: DuplicateMatch, path: str) -> Issue:
    own_side = match.file1 == path
    other = match.file2 if own_side else match.file1
    return Issue(
        file=path,
        line=match.line1 if own_side else match.line2,
        other_file=other,
        severity=severity_for(match.similarity),
        message=(
            f"{match.pattern_type} pattern {round(match.similarity * 100)}% similar to "
            f"{other} ({match.token_cost} tokens wasted)"
        ),
        suggestion=refactoring_suggestion(match.pattern_type, match.similarity),
        pattern_type=match.pattern_type,
        similarity=match.similarity,
        token_cost=match.token_cost,
    )


def build_file_analyses(paths: list[str], report: DetectionReport) -> list[FileAnalysis]:
    analyses: list[FileAnalysis] = []
    for path in paths:
        touching = report.matches_for(path)
        analyses.append(
            FileAnalysis(
                file=path,
                issues=[issue_for(match, path) for match in touching],
                token_cost=sum(match.token_cost for match in touching),
                consistency_score=max(0.0, 1.0 - 0.1 * len(touching)),
            )
        )
    return analyses
