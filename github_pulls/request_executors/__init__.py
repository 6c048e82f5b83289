"""Request executors performing the HTTP I/O for API endpoints."""

from github_pulls.request_executors.abstract_request_executor import AbstractRequestExecutor
from github_pulls.request_executors.http_request_executor import HttpRequestExecutor

__all__ = ["AbstractRequestExecutor", "HttpRequestExecutor"]
