from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from specreview_core import redact

from .files import classify_files
from .github import GitHubClient, IssueComment, PullRequest
from .models import ChecklistRecord, FileClassification, RuleOutcome
from .parser import parse_checklist
from .report import REPORT_MARKER, render_report
from .rules import LinkProbe, evaluate_rules
from .urls import probe_content_length

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReviewResult:
    pull_request: PullRequest
    records: list[ChecklistRecord]
    classification: FileClassification
    outcomes: list[RuleOutcome]
    report: str
    updated_comment_id: int | None = None


def review_pull_request(
    client: GitHubClient,
    number: int,
    *,
    probe: LinkProbe = probe_content_length,
    update: bool = True,
) -> ReviewResult:
    """Recompute the checklist report for PR ``number`` and update its comment.

    Errors from GitHub and malformed checklists propagate; link failures are
    reported as rule outcomes.
    """
    pr = client.get_pull_request(number)
    logger.info("reviewing PR#%d (%s)", pr.number, redact(pr.title))

    records = parse_checklist(pr.body)
    files = client.list_files(number)
    for item in files:
        logger.debug("file: %s/%s raw=%s", item.filename, item.status, item.raw_url)
    classification = classify_files(item.filename for item in files)

    outcomes = evaluate_rules(records, classification, probe)
    report = render_report(outcomes, classification.spec_name, classification.spec_version)

    updated: int | None = None
    if update:
        updated = _update_review_comment(client, pr, report)

    return ReviewResult(
        pull_request=pr,
        records=records,
        classification=classification,
        outcomes=outcomes,
        report=report,
        updated_comment_id=updated,
    )


def find_review_comment(
    comments: Sequence[IssueComment], assignee: str | None
) -> IssueComment | None:
    """Return the first checklist comment written by ``assignee``."""
    if assignee is None:
        return None
    for comment in comments:
        if comment.author == assignee and comment.body.startswith(REPORT_MARKER):
            return comment
    return None


def _update_review_comment(client: GitHubClient, pr: PullRequest, report: str) -> int | None:
    if pr.assignee is None:
        logger.info("PR#%d has no assignee, not updating any comment", pr.number)
        return None

    comment = find_review_comment(client.list_comments(pr.number), pr.assignee)
    if comment is None:
        logger.info("no checklist comment by %s on PR#%d", pr.assignee, pr.number)
        return None

    logger.info("updating spec review checklist comment %d", comment.id)
    client.update_comment(comment.id, report)
    return comment.id
