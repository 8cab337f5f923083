"""Render rule outcomes as the body of the review comment."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from .models import CheckStatus, RuleOutcome

__all__ = [
    "REPORT_MARKER",
    "render_report",
    "summarize",
]

REPORT_MARKER = "# Spec Review Checklist"

# https://github.com/scotch-io/All-Github-Emoji-Icons
STATUS_GLYPHS: dict[CheckStatus, str] = {
    CheckStatus.PASS: "- [x] :heavy_check_mark: ",
    CheckStatus.FAIL: "- [ ] :exclamation: ",
    CheckStatus.REVIEW: "- [ ] :question: ",
}


def render_report(outcomes: Sequence[RuleOutcome], spec_name: str, spec_version: str) -> str:
    lines = [
        REPORT_MARKER,
        "Hello, I'm here to help you checking this pull request for "
        f"__{spec_name}__, version __{spec_version}__",
        "",
        "1. Spec PR",
    ]
    for outcome in outcomes:
        lines.append(STATUS_GLYPHS[outcome.status] + outcome.title)
        lines.extend(f"\t{detail}" for detail in outcome.details)
    return "\n".join(lines) + "\n"


def summarize(outcomes: Sequence[RuleOutcome]) -> dict[CheckStatus, int]:
    counts = Counter(outcome.status for outcome in outcomes)
    return {status: counts.get(status, 0) for status in CheckStatus}
