"""Abstract executor performing the HTTP calls for API endpoints."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class AbstractRequestExecutor(ABC):
    """Performs requests against the API and returns the parsed response body.

    Failures are raised as github_pulls.errors.RemoteError subclasses.
    """

    @abstractmethod
    def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any: ...

    @abstractmethod
    def post(self, path: str, params: Mapping[str, Any] | None = None) -> Any: ...

    @abstractmethod
    def patch(self, path: str, params: Mapping[str, Any] | None = None) -> Any: ...

    @abstractmethod
    def put(self, path: str, params: Mapping[str, Any] | None = None) -> Any: ...

    @abstractmethod
    def delete(self, path: str, params: Mapping[str, Any] | None = None) -> Any: ...
