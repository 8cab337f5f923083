"""Minimal GitHub REST client for reading a PR and updating its comments."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from specreview_core import redact

from .. import __version__
from ..errors import GitHubError
from .models import GitHubConfig, IssueComment, PullRequest, PullRequestFile

__all__ = [
    "GitHubClient",
    "PAGE_SIZE",
]

logger = logging.getLogger(__name__)

PAGE_SIZE = 100
MAX_PAGES = 30


class GitHubClient:
    """Issue GitHub API calls for one repository over a shared HTTP client.

    Use as a context manager so the underlying connection pool is closed.
    """

    def __init__(self, config: GitHubConfig) -> None:
        self._config = config
        self._client = httpx.Client(timeout=config.timeout_seconds)

    @property
    def config(self) -> GitHubConfig:
        return self._config

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def get_pull_request(self, number: int) -> PullRequest:
        data = self._request("GET", f"/pulls/{number}")
        return PullRequest.from_api(data)

    def list_files(self, number: int) -> list[PullRequestFile]:
        return [PullRequestFile.from_api(item) for item in self._paginate(f"/pulls/{number}/files")]

    def list_comments(self, number: int) -> list[IssueComment]:
        return [
            IssueComment.from_api(item) for item in self._paginate(f"/issues/{number}/comments")
        ]

    def update_comment(self, comment_id: int, body: str) -> None:
        self._request("PATCH", f"/issues/comments/{comment_id}", json={"body": body})

    def _paginate(self, path: str) -> list[dict[str, Any]]:
        items: list[dict[str, Any]] = []
        for page in range(1, MAX_PAGES + 1):
            batch = self._request("GET", path, params={"per_page": PAGE_SIZE, "page": page})
            if not isinstance(batch, list):
                raise GitHubError(f"unexpected response for {path}")
            items.extend(batch)
            if len(batch) < PAGE_SIZE:
                break
        else:
            logger.warning("stopped paging %s after %d pages", path, MAX_PAGES)
        return items

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        url = f"{self._config.repo_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            response = self._client.request(
                method, url, headers=self._headers(), params=params, json=json
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            detail = redact(str(exc.response.text)[:200])
            raise GitHubError(f"GitHub API error {status}: {detail}", status_code=status) from exc
        except httpx.HTTPError as exc:
            raise GitHubError(f"GitHub request failed: {redact(str(exc))}") from exc
        try:
            return response.json()
        except ValueError as exc:
            raise GitHubError(f"GitHub returned invalid JSON for {path}") from exc

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._config.token}",
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": f"specreview/{__version__}",
        }
