from __future__ import annotations


class SpecReviewError(Exception):
    """Base class for errors that abort a review run."""


class ConfigError(SpecReviewError):
    """Required configuration is missing or invalid."""


class MalformedChecklistError(SpecReviewError, ValueError):
    """The PR body holds more checklist items than the template defines."""

    def __init__(self, position: int) -> None:
        super().__init__(f"unexpected checklist item at position {position}")
        self.position = position


class GitHubError(SpecReviewError):
    """A GitHub API request failed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
