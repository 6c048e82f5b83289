"""Shared test fixtures for github_pulls tests."""

from __future__ import annotations

import os
from collections.abc import Generator, Mapping
from pathlib import Path
from typing import Any

from typing_extensions import override

import pytest

from github_pulls.pull_requests import PullRequestsAPI
from github_pulls.request_executors.abstract_request_executor import AbstractRequestExecutor


class SpyExecutor(AbstractRequestExecutor):
    """Records every request and answers from canned responses."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, dict[str, Any]]] = []
        self.responses: dict[tuple[str, str], Any] = {}
        self.errors: dict[tuple[str, str], Exception] = {}

    def respond(self, method: str, path: str, response: Any) -> None:
        self.responses[(method, path)] = response

    def fail(self, method: str, path: str, error: Exception) -> None:
        self.errors[(method, path)] = error

    def _record(self, method: str, path: str, params: Mapping[str, Any] | None) -> Any:
        self.calls.append((method, path, dict(params or {})))
        if (method, path) in self.errors:
            raise self.errors[(method, path)]
        return self.responses.get((method, path))

    @override
    def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return self._record("GET", path, params)

    @override
    def post(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return self._record("POST", path, params)

    @override
    def patch(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return self._record("PATCH", path, params)

    @override
    def put(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return self._record("PUT", path, params)

    @override
    def delete(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return self._record("DELETE", path, params)


@pytest.fixture
def spy_executor() -> SpyExecutor:
    """Executor recording calls instead of sending them."""
    return SpyExecutor()


@pytest.fixture
def pulls(spy_executor: SpyExecutor) -> PullRequestsAPI:
    """Pull requests API without default owner/repository."""
    return PullRequestsAPI(spy_executor)


# Sample API payloads
@pytest.fixture
def sample_pulls() -> list[dict[str, Any]]:
    """Two pull requests as returned by the list endpoint."""
    return [
        {
            "number": 1347,
            "title": "Amazing new feature",
            "state": "open",
            "html_url": "https://github.com/octocat/hello-world/pull/1347",
            "user": {"login": "octocat"},
        },
        {
            "number": 1348,
            "title": "Fix typo in README",
            "state": "open",
            "html_url": "https://github.com/octocat/hello-world/pull/1348",
            "user": {"login": "hubot"},
        },
    ]


@pytest.fixture
def sample_commits() -> list[dict[str, Any]]:
    return [
        {"sha": "6dcb09b5b57875f334f61aebed695e2e4193db5e", "commit": {"message": "Fix all the bugs"}},
        {"sha": "7638417db6d59f3c431d3e1f261cc637155684cd", "commit": {"message": "Add tests\n\nMore"}},
    ]


@pytest.fixture
def sample_files() -> list[dict[str, Any]]:
    return [
        {
            "filename": "file1.txt",
            "status": "added",
            "additions": 103,
            "deletions": 21,
            "changes": 124,
        }
    ]


@pytest.fixture
def cassette_dir() -> str:
    """Return the cassette directory."""
    return str(Path(__file__).parent / "cassettes")


@pytest.fixture
def no_github_token() -> Generator[None, None, None]:
    """Remove GitHub token for testing unauthenticated requests."""
    old_token = os.environ.get("GITHUB_TOKEN")
    os.environ.pop("GITHUB_TOKEN", None)
    yield
    if old_token:
        os.environ["GITHUB_TOKEN"] = old_token
