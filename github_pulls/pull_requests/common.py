"""Helpers shared by the pull request endpoints."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from github_pulls.models import RequestContext
from github_pulls.validation import assert_presence_of

Record = dict[str, Any]
Records = list[Record]
Callback = Callable[[Record], Any]


def resolve_context(
    owner: str | None,
    repository: str | None,
    default_owner: str | None = None,
    default_repository: str | None = None,
) -> RequestContext:
    """Build the context for one call, falling back to the configured defaults.

    Raises MissingArgument when owner or repository ends up empty.
    """
    context = RequestContext(
        owner=owner if owner is not None else default_owner,
        repository=repository if repository is not None else default_repository,
    )
    assert_presence_of(owner=context.owner, repository=context.repository)
    return context


def each_element(response: Any, callback: Callback | None) -> Any:
    """Return the response, or hand every element to callback in order."""
    if callback is None:
        return response
    for element in response or []:
        callback(element)
    return None
