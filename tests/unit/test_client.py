"""Unit tests for the GitHub entry point and the API factory."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from github_pulls import GitHub
from github_pulls.api_factory import create_api
from github_pulls.models import ClientConfig
from github_pulls.pull_requests import PullRequestCommentsAPI, PullRequestsAPI
from github_pulls.request_executors import HttpRequestExecutor

if TYPE_CHECKING:
    from conftest import SpyExecutor


class TestCreateApi:
    """Tests for create_api."""

    def test_pull_requests(self, spy_executor: SpyExecutor) -> None:
        api = create_api("pull_requests", spy_executor, user="octocat", repo="hello-world")
        assert isinstance(api, PullRequestsAPI)
        assert api.user == "octocat"

    def test_comments(self, spy_executor: SpyExecutor) -> None:
        api = create_api("Pull_Requests.Comments", spy_executor)
        assert isinstance(api, PullRequestCommentsAPI)

    def test_unknown_name(self, spy_executor: SpyExecutor) -> None:
        with pytest.raises(ValueError, match="Unknown API"):
            create_api("gists", spy_executor)


class TestGitHub:
    """Tests for the GitHub client."""

    def test_default_executor(self) -> None:
        github = GitHub(ClientConfig(token="secret"))
        assert isinstance(github.executor, HttpRequestExecutor)
        assert github.executor.config is github.config

    def test_options_override_config(self, spy_executor: SpyExecutor) -> None:
        github = GitHub(executor=spy_executor, user="octocat", repo="hello-world")
        pulls = github.pull_requests

        assert github.pulls is pulls
        pulls.list()
        assert spy_executor.calls == [("GET", "/repos/octocat/hello-world/pulls", {})]

    def test_options_are_validated(self) -> None:
        with pytest.raises(ValidationError):
            GitHub(ClientConfig(token="secret"), per_page=500)
        with pytest.raises(ValidationError):
            GitHub(ClientConfig(token="secret"), unknown_option=True)

    def test_token_none_falls_back_to_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITHUB_TOKEN", "env-token")
        github = GitHub(ClientConfig(token="explicit"), token=None)
        assert github.config.token == "env-token"
