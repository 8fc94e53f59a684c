from __future__ import annotations

import sys
from typing import TextIO

from patterndetect.core.types import AnalysisResult
from patterndetect.reporting.summary import generate_summary


class TextReporter:
    def write(self, result: AnalysisResult, out_path: str) -> None:
        if out_path == "-":
            self.render(result, sys.stdout)
            return
        with open(out_path, "w", encoding="utf-8") as handle:
            self.render(result, handle)

    def render(self, result: AnalysisResult, stream: TextIO) -> None:
        report = result.report
        summary = generate_summary(result.analyses)
        stream.write(
            f"Scanned {result.file_count} files, {report.blocks_analyzed} blocks, "
            f"{report.comparisons} comparisons\n"
        )
        stream.write(
            f"{len(report.matches)} duplicate patterns, "
            f"{summary.total_token_cost} tokens of duplicated context\n"
        )
        for pattern_type, count in summary.patterns_by_type.items():
            if count:
                stream.write(f"  {pattern_type}: {count}\n")
        for match in report.matches:
            stream.write(
                f"{match.similarity:6.1%}  {match.pattern_type:<12}  "
                f"{match.file1}:{match.line1} <-> {match.file2}:{match.line2}  "
                f"({match.token_cost} tokens)\n"
            )
        for warning in report.warnings:
            stream.write(f"warning: {warning}\n")
