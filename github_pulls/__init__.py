"""Parameter-validating client for the GitHub pull requests API."""

from github_pulls.client import GitHub
from github_pulls.models import ClientConfig, MergeCheck, MergeStatus
from github_pulls.pull_requests import PullRequestCommentsAPI, PullRequestsAPI

__version__ = "0.1.0"
__all__ = [
    "ClientConfig",
    "GitHub",
    "MergeCheck",
    "MergeStatus",
    "PullRequestCommentsAPI",
    "PullRequestsAPI",
]
