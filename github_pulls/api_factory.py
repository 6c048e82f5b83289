"""Builds API endpoint handles from their resource family name."""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from github_pulls.request_executors.abstract_request_executor import (
        AbstractRequestExecutor,
    )

API_CLASSES = {
    "pull_requests": "github_pulls.pull_requests.pull_requests_api.PullRequestsAPI",
    "pull_requests.comments": "github_pulls.pull_requests.comments.PullRequestCommentsAPI",
}


def create_api(
    name: str,
    executor: AbstractRequestExecutor,
    user: str | None = None,
    repo: str | None = None,
    **options: Any,
) -> Any:
    """Return an instance of the API registered under name."""
    class_path = API_CLASSES.get(name.strip().lower())
    if class_path is None:
        raise ValueError(f"Unknown API: {name}")

    module_name, class_name = class_path.rsplit(".", 1)
    module = importlib.import_module(module_name)
    api_class = getattr(module, class_name)
    return api_class(executor, user=user, repo=repo, **options)
