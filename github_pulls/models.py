"""Data models for the pull requests client."""

from __future__ import annotations

import os
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from github_pulls.errors import RemoteError

DEFAULT_ENDPOINT = "https://api.github.com"


class ClientConfig(BaseModel):
    """Client configuration."""

    model_config = ConfigDict(extra="forbid")

    endpoint: str = DEFAULT_ENDPOINT
    token: str | None = None
    # Defaults used when a call omits owner/repository
    user: str | None = None
    repo: str | None = None

    timeout: float = 30
    max_retries: int = 5
    backoff_factor: float = 2
    per_page: int | None = Field(default=None, ge=1, le=100)
    auto_pagination: bool = False
    user_agent: str = "github-pulls"

    @model_validator(mode="after")
    def set_default_token(self) -> ClientConfig:
        """Fall back to GITHUB_TOKEN when no token is given."""
        if self.token is None:
            self.token = os.getenv("GITHUB_TOKEN")
        return self


class RequestContext(BaseModel):
    """Owner and repository a single call operates on."""

    owner: str | None = None
    repository: str | None = None


class MergeStatus(StrEnum):
    MERGED = "merged"
    NOT_MERGED = "not_merged"
    ERROR = "error"


class MergeCheck(BaseModel):
    """Outcome of checking whether a pull request has been merged."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    status: MergeStatus
    error: RemoteError | None = None

    def to_bool(self) -> bool:
        """Collapse to a boolean, re-raising the carried error."""
        if self.status is MergeStatus.ERROR:
            if self.error is None:
                raise RuntimeError("Merge check failed without an error attached")
            raise self.error
        return self.status is MergeStatus.MERGED
