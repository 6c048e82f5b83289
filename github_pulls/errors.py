"""Error types raised by the pull requests client."""

from __future__ import annotations

from typing import Any


class GitHubPullsError(Exception):
    """Base class for all errors raised by github_pulls."""


class ValidationError(GitHubPullsError):
    """Raised locally, before any request is sent."""


class MissingArgument(ValidationError):
    """A required argument (owner, repository, identifier) is absent."""


class InvalidValue(ValidationError):
    """A constrained parameter holds a value outside its allowed set."""

    def __init__(self, key: str, value: Any, allowed: list[str]):
        self.key = key
        self.value = value
        self.allowed = allowed
        super().__init__(f"Invalid value {value!r} for '{key}', expected one of: {', '.join(allowed)}")


class RemoteError(GitHubPullsError):
    """Failure reported by the remote API or the transport."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: Any = None,
    ):
        self.message = message
        self.status_code = status_code
        self.body = body
        super().__init__(f"{status_code} {message}" if status_code else message)


class NetworkError(RemoteError):
    """The request never produced an HTTP response."""


class ClientError(RemoteError):
    """4xx response."""


class BadRequest(ClientError):
    pass


class Unauthorized(ClientError):
    pass


class Forbidden(ClientError):
    pass


class RateLimitExceeded(Forbidden):
    pass


class NotFound(ClientError):
    pass


class UnprocessableEntity(ClientError):
    pass


class ServerError(RemoteError):
    """5xx response."""


_STATUS_ERRORS: dict[int, type[ClientError]] = {
    400: BadRequest,
    401: Unauthorized,
    403: Forbidden,
    404: NotFound,
    422: UnprocessableEntity,
    429: RateLimitExceeded,
}


def error_for_status(
    status_code: int,
    message: str,
    body: Any = None,
    rate_limit_remaining: str | None = None,
) -> RemoteError:
    """Build the error matching an HTTP error status."""
    if status_code == 403 and rate_limit_remaining == "0":
        return RateLimitExceeded(message, status_code, body)
    if status_code >= 500:
        return ServerError(message, status_code, body)
    error_class = _STATUS_ERRORS.get(status_code, ClientError)
    return error_class(message, status_code, body)
