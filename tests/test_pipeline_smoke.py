from pathlib import Path

from patterndetect.core.config import DetectionConfig, PatternDetectConfig
from patterndetect.core.pipeline import analyze_patterns
from patterndetect.reporting.summary import generate_summary

FIXTURE = Path(__file__).resolve().parents[1] / "fixtures" / "tiny_repo"


def test_pipeline_smoke():
    result = analyze_patterns([str(FIXTURE)], PatternDetectConfig())
    names = [Path(a.file).name for a in result.analyses]
    assert names == ["invoices.js", "orders.js", "routes.js"]
    assert result.file_count == 3
    assert result.report.blocks_extracted == 3
    assert len(result.report.matches) == 1
    assert set(result.timing) == {"collect_files", "detect"}


def test_pipeline_builds_issues_per_file():
    result = analyze_patterns([str(FIXTURE)], PatternDetectConfig())
    by_name = {Path(a.file).name: a for a in result.analyses}

    invoices = by_name["invoices.js"]
    assert len(invoices.issues) == 1
    issue = invoices.issues[0]
    assert issue.type == "duplicate-pattern"
    assert issue.line == 5
    assert Path(issue.other_file).name == "orders.js"
    assert issue.message.startswith("utility pattern ")
    assert "% similar to " in issue.message
    assert issue.message.endswith(f"({issue.token_cost} tokens wasted)")
    assert issue.severity == "minor"
    assert issue.suggestion == "Move to a shared utilities file and reuse across modules"
    assert invoices.consistency_score == 0.9

    orders = by_name["orders.js"]
    assert orders.issues[0].line == 4
    assert orders.token_cost == invoices.token_cost

    routes = by_name["routes.js"]
    assert routes.issues == []
    assert routes.token_cost == 0
    assert routes.consistency_score == 1.0


def test_summary_counts_issues_by_type():
    result = analyze_patterns([str(FIXTURE)], PatternDetectConfig())
    summary = generate_summary(result.analyses)
    assert summary.total_patterns == 2
    assert summary.patterns_by_type["utility"] == 2
    assert summary.patterns_by_type["api-handler"] == 0
    assert len(summary.patterns_by_type) == 7
    assert summary.total_token_cost == 2 * result.report.matches[0].token_cost
    assert len(summary.top_duplicates) == 2


def test_pipeline_without_excludes_sees_vendored_copy():
    config = PatternDetectConfig(exclude_globs=[], detection=DetectionConfig(approx=False))
    result = analyze_patterns([str(FIXTURE)], config)
    assert result.file_count == 4
    assert result.report.matches[0].similarity == 1.0
