from __future__ import annotations

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass, field

from .errors import ConfigError
from .github.models import DEFAULT_API_BASE, GitHubConfig

DEFAULT_REPOSITORY = "jakartaredhat/specifications"
DEFAULT_PR_NUMBER = 1

TOKEN_ENV = "GITHUB_TOKEN"  # noqa: S105  # nosec B105
REPOSITORY_ENV = "SPECREVIEW_REPOSITORY"
API_URL_ENV = "GITHUB_API_URL"

REPOSITORY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+/[A-Za-z0-9_.-]+$")


@dataclass(frozen=True)
class Settings:
    token: str = field(repr=False)
    repository: str = DEFAULT_REPOSITORY
    api_base: str = DEFAULT_API_BASE
    pr_number: int = DEFAULT_PR_NUMBER

    @property
    def owner(self) -> str:
        return self.repository.split("/", 1)[0]

    @property
    def repo(self) -> str:
        return self.repository.split("/", 1)[1]

    def github_config(self) -> GitHubConfig:
        return GitHubConfig(
            token=self.token,
            owner=self.owner,
            repo=self.repo,
            api_base=self.api_base,
        )


def load_settings(
    environ: Mapping[str, str] | None = None,
    *,
    pr_number: int | None = None,
    repository: str | None = None,
) -> Settings:
    """Build settings from the environment, letting explicit arguments win.

    Raises:
        ConfigError: If the access token is missing or the repository is not
            of the form ``owner/name``.
    """
    env = os.environ if environ is None else environ

    token = (env.get(TOKEN_ENV) or "").strip()
    if not token:
        raise ConfigError(
            f"Specify the access token to use via the {TOKEN_ENV} environment variable"
        )

    repo = repository or env.get(REPOSITORY_ENV) or DEFAULT_REPOSITORY
    if not REPOSITORY_PATTERN.match(repo):
        raise ConfigError(f"Repository must be of the form owner/name, got {repo!r}")

    number = DEFAULT_PR_NUMBER if pr_number is None else pr_number
    if number < 1:
        raise ConfigError("PR number must be positive")

    return Settings(
        token=token,
        repository=repo,
        api_base=(env.get(API_URL_ENV) or DEFAULT_API_BASE).rstrip("/"),
        pr_number=number,
    )
