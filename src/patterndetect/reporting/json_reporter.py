from __future__ import annotations

import json
from dataclasses import asdict

from patterndetect.core.types import AnalysisResult, DuplicateMatch, FileAnalysis
from patterndetect.reporting.schema import SCHEMA_VERSION
from patterndetect.reporting.summary import generate_summary


class JsonReporter:
    def write(self, result: AnalysisResult, out_path: str) -> None:
        report = result.report
        payload = {
            "schema_version": SCHEMA_VERSION,
            "summary": asdict(generate_summary(result.analyses)),
            "matches": [_serialize_match(match) for match in report.matches],
            "files": [_serialize_analysis(analysis) for analysis in result.analyses],
            "stats": {
                "file_count": result.file_count,
                "blocks_extracted": report.blocks_extracted,
                "blocks_analyzed": report.blocks_analyzed,
                "comparisons": report.comparisons,
                "budget_exhausted": report.budget_exhausted,
            },
            "warnings": report.warnings,
            "timing": result.timing,
        }
        with open(out_path, "w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2)


def _serialize_match(match: DuplicateMatch) -> dict[str, object]:
    return {
        "file1": match.file1,
        "line1": match.line1,
        "file2": match.file2,
        "line2": match.line2,
        "similarity": round(match.similarity, 4),
        "pattern_type": match.pattern_type,
        "token_cost": match.token_cost,
        "lines_of_code": match.lines_of_code,
        "snippet": match.snippet,
    }


def _serialize_analysis(analysis: FileAnalysis) -> dict[str, object]:
    return {
        "file": analysis.file,
        "token_cost": analysis.token_cost,
        "consistency_score": analysis.consistency_score,
        "issues": [
            {
                "type": issue.type,
                "severity": issue.severity,
                "message": issue.message,
                "line": issue.line,
                "suggestion": issue.suggestion,
            }
            for issue in analysis.issues
        ],
    }
