from .client import GitHubClient
from .models import GitHubConfig, IssueComment, PullRequest, PullRequestFile

__all__ = [
    "GitHubClient",
    "GitHubConfig",
    "IssueComment",
    "PullRequest",
    "PullRequestFile",
]
