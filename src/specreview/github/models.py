"""Data models for the GitHub REST API objects used by a review."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

DEFAULT_API_BASE = "https://api.github.com"


@dataclass(frozen=True)
class GitHubConfig:
    """Connection settings for one repository."""

    token: str = field(repr=False)
    owner: str
    repo: str
    api_base: str = DEFAULT_API_BASE
    timeout_seconds: float = 30.0

    @property
    def repo_url(self) -> str:
        return f"{self.api_base.rstrip('/')}/repos/{self.owner}/{self.repo}"


def _login(user: Any) -> str | None:
    if isinstance(user, dict) and user.get("login"):
        return str(user["login"])
    return None


@dataclass(frozen=True)
class PullRequest:
    number: int
    title: str
    body: str
    assignee: str | None
    changed_files: int
    review_comments: int
    issue_url: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> PullRequest:
        return cls(
            number=int(data["number"]),
            title=str(data.get("title") or ""),
            body=str(data.get("body") or ""),
            assignee=_login(data.get("assignee")),
            changed_files=int(data.get("changed_files") or 0),
            review_comments=int(data.get("review_comments") or 0),
            issue_url=str(data.get("issue_url") or ""),
        )


@dataclass(frozen=True)
class PullRequestFile:
    filename: str
    status: str
    raw_url: str | None = None
    contents_url: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> PullRequestFile:
        return cls(
            filename=str(data["filename"]),
            status=str(data.get("status") or ""),
            raw_url=data.get("raw_url"),
            contents_url=data.get("contents_url"),
        )


@dataclass(frozen=True)
class IssueComment:
    id: int
    author: str | None
    body: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> IssueComment:
        return cls(
            id=int(data["id"]),
            author=_login(data.get("user")),
            body=str(data.get("body") or ""),
        )
