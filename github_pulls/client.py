"""Client entry point."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from github_pulls.api_factory import create_api
from github_pulls.config import load_config
from github_pulls.models import ClientConfig
from github_pulls.pull_requests import PullRequestsAPI
from github_pulls.request_executors import AbstractRequestExecutor, HttpRequestExecutor

logger = logging.getLogger(__name__)


class GitHub:
    """Entry point wiring configuration, the request executor and the APIs."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        executor: AbstractRequestExecutor | None = None,
        **options: Any,
    ):
        """
        Initialize the client.

        Args:
            config: Client configuration (defaults when omitted)
            executor: Request executor to use instead of the HTTP one
            **options: Overrides for config fields, e.g. user="octocat"

        """
        config = config or ClientConfig()
        if options:
            config = ClientConfig.model_validate({**config.model_dump(), **options})
        self.config = config
        self.executor = executor or HttpRequestExecutor(self.config)
        self._pull_requests: PullRequestsAPI | None = None

    @classmethod
    def from_config_file(cls, config_path: Path | None = None, **options: Any) -> GitHub:
        return cls(load_config(config_path), **options)

    @property
    def pull_requests(self) -> PullRequestsAPI:
        if self._pull_requests is None:
            self._pull_requests = create_api(
                "pull_requests", self.executor, user=self.config.user, repo=self.config.repo
            )
        return self._pull_requests

    pulls = pull_requests
