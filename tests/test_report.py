from __future__ import annotations

from specreview.files import classify_files
from specreview.models import CheckStatus, RuleOutcome
from specreview.report import REPORT_MARKER, render_report, summarize
from specreview.rules import evaluate_rules


def test_render_report_layout() -> None:
    outcomes = [
        RuleOutcome("a", "Passing rule", CheckStatus.PASS),
        RuleOutcome("b", "Failing rule", CheckStatus.FAIL, ("first detail", "second detail")),
        RuleOutcome("c", "Manual rule", CheckStatus.REVIEW),
    ]
    report = render_report(outcomes, "foo", "1.0")
    assert report.splitlines() == [
        REPORT_MARKER,
        "Hello, I'm here to help you checking this pull request for __foo__, version __1.0__",
        "",
        "1. Spec PR",
        "- [x] :heavy_check_mark: Passing rule",
        "- [ ] :exclamation: Failing rule",
        "\tfirst detail",
        "\tsecond detail",
        "- [ ] :question: Manual rule",
    ]
    assert report.endswith("\n")


def test_stray_file_named_in_failure_line() -> None:
    classification = classify_files(["logo.png"])
    outcomes = evaluate_rules([], classification, lambda url: 1)
    report = render_report(outcomes, classification.spec_name, classification.spec_version)
    lines = report.splitlines()
    index = lines.index("- [ ] :exclamation: No other files")
    assert "logo.png" in lines[index + 1]
    assert "__unknown__" in lines[1]


def test_summarize_counts_every_status() -> None:
    outcomes = [
        RuleOutcome("a", "A", CheckStatus.PASS),
        RuleOutcome("b", "B", CheckStatus.PASS),
        RuleOutcome("c", "C", CheckStatus.REVIEW),
    ]
    assert summarize(outcomes) == {
        CheckStatus.PASS: 2,
        CheckStatus.FAIL: 0,
        CheckStatus.REVIEW: 1,
    }
