"""Pull requests resource family."""

from github_pulls.pull_requests.comments import PullRequestCommentsAPI
from github_pulls.pull_requests.pull_requests_api import PullRequestsAPI

__all__ = ["PullRequestCommentsAPI", "PullRequestsAPI"]
