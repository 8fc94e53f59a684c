from __future__ import annotations

from patterndetect.core.types import PATTERN_TYPES, FileAnalysis, PatternSummary, TopDuplicate

TOP_DUPLICATES = 10


def generate_summary(analyses: list[FileAnalysis]) -> PatternSummary:
    issues = [issue for analysis in analyses for issue in analysis.issues]
    by_type = dict.fromkeys(PATTERN_TYPES, 0)
    for issue in issues:
        by_type[issue.pattern_type] += 1
    return PatternSummary(
        total_patterns=len(issues),
        total_token_cost=sum(analysis.token_cost for analysis in analyses),
        patterns_by_type=by_type,
        top_duplicates=[
            TopDuplicate(
                file1=issue.file,
                file2=issue.other_file,
                similarity=issue.similarity,
                pattern_type=issue.pattern_type,
                token_cost=issue.token_cost,
            )
            for issue in issues[:TOP_DUPLICATES]
        ],
    )
