from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

PatternType = Literal[
    "api-handler",
    "validator",
    "component",
    "class-method",
    "utility",
    "function",
    "unknown",
]
Severity = Literal["critical", "major", "minor"]

PATTERN_TYPES: tuple[PatternType, ...] = (
    "api-handler",
    "validator",
    "component",
    "class-method",
    "utility",
    "function",
    "unknown",
)


@dataclass(frozen=True, slots=True)
class SourceFile:
    path: str
    content: str


@dataclass(frozen=True, slots=True)
class RawBlock:
    start_line: int
    content: str
    pattern_type: PatternType
    lines_of_code: int


@dataclass(frozen=True, slots=True)
class CodeBlock:
    file: str
    content: str
    start_line: int
    pattern_type: PatternType
    normalized: str
    tokens: frozenset[str]
    lines_of_code: int
    token_cost: int


@dataclass(frozen=True, slots=True)
class Candidate:
    index: int
    shared: int


@dataclass(frozen=True, slots=True)
class DuplicateMatch:
    file1: str
    line1: int
    file2: str
    line2: int
    similarity: float
    pattern_type: PatternType
    token_cost: int
    lines_of_code: int
    snippet: str

    def touches(self, path: str) -> bool:
        return self.file1 == path or self.file2 == path


@dataclass(frozen=True, slots=True)
class DetectionProgress:
    blocks_processed: int
    total_blocks: int
    comparisons: int
    total_comparisons: int | None
    elapsed: float
    budget_exhausted: bool = False
    done: bool = False

    @property
    def percent(self) -> float | None:
        if self.total_comparisons is None:
            return None
        if self.total_comparisons == 0:
            return 100.0
        return 100.0 * self.comparisons / self.total_comparisons


@dataclass(frozen=True, slots=True)
class DetectionReport:
    matches: list[DuplicateMatch]
    blocks_extracted: int
    blocks_analyzed: int
    comparisons: int
    budget_exhausted: bool
    warnings: list[str] = field(default_factory=list)

    def matches_for(self, path: str) -> list[DuplicateMatch]:
        return [match for match in self.matches if match.touches(path)]


@dataclass(frozen=True, slots=True)
class Issue:
    file: str
    line: int
    other_file: str
    severity: Severity
    message: str
    suggestion: str
    pattern_type: PatternType
    similarity: float
    token_cost: int
    type: str = "duplicate-pattern"


@dataclass(frozen=True, slots=True)
class FileAnalysis:
    file: str
    issues: list[Issue]
    token_cost: int
    consistency_score: float


@dataclass(frozen=True, slots=True)
class TopDuplicate:
    file1: str
    file2: str
    similarity: float
    pattern_type: PatternType
    token_cost: int


@dataclass(frozen=True, slots=True)
class PatternSummary:
    total_patterns: int
    total_token_cost: int
    patterns_by_type: dict[str, int]
    top_duplicates: list[TopDuplicate]


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    analyses: list[FileAnalysis]
    report: DetectionReport
    file_count: int
    timing: dict[str, float]
