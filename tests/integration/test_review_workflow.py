"""End-to-end review of a PR against a fake GitHub client."""

from __future__ import annotations

import pytest

from specreview.errors import MalformedChecklistError
from specreview.github import IssueComment, PullRequest, PullRequestFile
from specreview.models import CheckStatus
from specreview.report import REPORT_MARKER
from specreview.service import find_review_comment, review_pull_request

SPEC_FILES = [
    "foo/1.0/_index.md",
    "foo/1.0/jakarta-foo-spec-1.0.pdf",
    "foo/1.0/jakarta-foo-spec-1.0.html",
    "foo/1.0/apidocs/index.html",
]


class FakeGitHubClient:
    def __init__(
        self,
        pr: PullRequest,
        files: list[str],
        comments: list[IssueComment],
    ) -> None:
        self.pr = pr
        self.files = [PullRequestFile(filename=f, status="added") for f in files]
        self.comments = comments
        self.updates: list[tuple[int, str]] = []
        self.comment_listings = 0

    def get_pull_request(self, number: int) -> PullRequest:
        assert number == self.pr.number
        return self.pr

    def list_files(self, number: int) -> list[PullRequestFile]:
        return self.files

    def list_comments(self, number: int) -> list[IssueComment]:
        self.comment_listings += 1
        return self.comments

    def update_comment(self, comment_id: int, body: str) -> None:
        self.updates.append((comment_id, body))


def _pr(body: str, assignee: str | None = "reviewer") -> PullRequest:
    return PullRequest(
        number=42,
        title="Jakarta Foo 1.0",
        body=body,
        assignee=assignee,
        changed_files=4,
        review_comments=0,
        issue_url="https://api.github.com/repos/jakartaredhat/specifications/issues/42",
    )


def _comments() -> list[IssueComment]:
    return [
        IssueComment(id=1, author="someone", body=f"{REPORT_MARKER}\nold"),
        IssueComment(id=2, author="reviewer", body="Thanks for the PR"),
        IssueComment(id=3, author="reviewer", body=f"{REPORT_MARKER}\nold"),
        IssueComment(id=4, author="reviewer", body=f"{REPORT_MARKER}\nolder"),
    ]


@pytest.mark.integration
class TestReviewWorkflow:
    def test_compliant_pr_updates_first_checklist_comment(self, body_builder) -> None:
        client = FakeGitHubClient(_pr(body_builder()), SPEC_FILES, _comments())

        result = review_pull_request(client, 42, probe=lambda url: 512)  # type: ignore[arg-type]

        assert result.updated_comment_id == 3
        assert client.updates == [(3, result.report)]
        assert result.report.startswith(REPORT_MARKER)
        assert "__foo__, version __1.0__" in result.report
        assert len(result.records) == 14
        assert result.classification.javadoc_files == ("foo/1.0/apidocs/index.html",)
        assert not [o for o in result.outcomes if o.status is CheckStatus.FAIL]

    def test_problems_are_reported_not_raised(self, body_builder) -> None:
        def unreachable(url: str) -> int:
            raise OSError("connection reset")

        client = FakeGitHubClient(
            _pr(body_builder(count=12)), ["logo.png", "README.md"], _comments()
        )

        result = review_pull_request(client, 42, probe=unreachable)  # type: ignore[arg-type]

        failed = {o.rule_id for o in result.outcomes if o.status is CheckStatus.FAIL}
        assert failed == {
            "template",
            "spec-directory",
            "spec-pdf",
            "spec-html",
            "no-other-files",
            "staging-repository",
            "tck-archive",
            "compatibility-certification",
        }
        assert "\tlogo.png, README.md" in result.report
        assert "Failed to access URL" in result.report
        assert "__unknown__" in result.report
        assert client.updates == [(3, result.report)]

    def test_dry_run_does_not_touch_comments(self, body_builder) -> None:
        client = FakeGitHubClient(_pr(body_builder()), SPEC_FILES, _comments())

        result = review_pull_request(
            client, 42, probe=lambda url: 1, update=False  # type: ignore[arg-type]
        )

        assert result.updated_comment_id is None
        assert client.updates == []
        assert client.comment_listings == 0

    def test_no_assignee_updates_nothing(self, body_builder) -> None:
        client = FakeGitHubClient(_pr(body_builder(), assignee=None), SPEC_FILES, _comments())

        result = review_pull_request(client, 42, probe=lambda url: 1)  # type: ignore[arg-type]

        assert result.updated_comment_id is None
        assert client.updates == []

    def test_no_matching_comment_creates_nothing(self, body_builder) -> None:
        client = FakeGitHubClient(_pr(body_builder(), assignee="other"), SPEC_FILES, _comments())

        result = review_pull_request(client, 42, probe=lambda url: 1)  # type: ignore[arg-type]

        assert result.updated_comment_id is None
        assert client.updates == []

    def test_malformed_checklist_aborts(self, body_builder) -> None:
        body = body_builder() + "\n- [ ] stray checkbox\n"
        client = FakeGitHubClient(_pr(body), SPEC_FILES, _comments())

        with pytest.raises(MalformedChecklistError):
            review_pull_request(client, 42, probe=lambda url: 1)  # type: ignore[arg-type]

        assert client.updates == []


def test_find_review_comment_requires_marker_at_start() -> None:
    comments = [IssueComment(id=9, author="reviewer", body=f"quote:\n{REPORT_MARKER}")]
    assert find_review_comment(comments, "reviewer") is None
    assert find_review_comment(_comments(), None) is None
