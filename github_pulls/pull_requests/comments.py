"""Pull request review comments API."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from github_pulls.models import RequestContext
from github_pulls.pull_requests.common import (
    Callback,
    Record,
    Records,
    each_element,
    resolve_context,
)
from github_pulls.validation import (
    assert_presence_of,
    assert_required_keys,
    filter_known,
    normalize,
)

if TYPE_CHECKING:
    from github_pulls.pull_requests.pull_requests_api import PullRequestsAPI
    from github_pulls.request_executors.abstract_request_executor import (
        AbstractRequestExecutor,
    )

VALID_REQUEST_PARAM_NAMES = frozenset(
    {
        "body",
        "commit_id",
        "path",
        "position",
        "in_reply_to",
        "mime_type",
        "resource",
    }
)

# A new comment either replies to another one or is placed on a diff line
REPLY_PARAMS = ("body", "in_reply_to")
POSITIONED_PARAMS = ("body", "commit_id", "path", "position")


class PullRequestCommentsAPI:
    """Access to the review comments on pull requests of a repository."""

    def __init__(
        self,
        executor: AbstractRequestExecutor,
        user: str | None = None,
        repo: str | None = None,
        parent: PullRequestsAPI | None = None,
    ):
        self.executor = executor
        self.user = user
        self.repo = repo
        self.parent = parent
        self.context = RequestContext()

    def _defaults(self) -> tuple[str | None, str | None]:
        """Repository used when a call omits owner/repository."""
        if self.parent is not None and self.parent.context.owner:
            return self.parent.context.owner, self.parent.context.repository
        return self.user, self.repo

    def _set_context(self, owner: str | None, repo: str | None) -> RequestContext:
        self.context = resolve_context(owner, repo, *self._defaults())
        return self.context

    def list(
        self,
        owner: str | None = None,
        repo: str | None = None,
        number: int | str | None = None,
        params: Mapping[str, Any] | None = None,
        callback: Callback | None = None,
    ) -> Records | None:
        """List comments on one pull request, or on every pull request when number is None."""
        ctx = self._set_context(owner, repo)
        params = normalize(params)

        if number is None:
            path = f"/repos/{ctx.owner}/{ctx.repository}/pulls/comments"
        else:
            assert_presence_of(number=number)
            path = f"/repos/{ctx.owner}/{ctx.repository}/pulls/{number}/comments"
        return each_element(self.executor.get(path, params), callback)

    all = list

    def get(
        self,
        owner: str | None,
        repo: str | None,
        comment_id: int | str,
        params: Mapping[str, Any] | None = None,
    ) -> Record:
        ctx = self._set_context(owner, repo)
        assert_presence_of(comment_id=comment_id)
        params = normalize(params)

        return self.executor.get(
            f"/repos/{ctx.owner}/{ctx.repository}/pulls/comments/{comment_id}", params
        )

    find = get

    def create(
        self,
        owner: str | None,
        repo: str | None,
        number: int | str,
        params: Mapping[str, Any] | None = None,
    ) -> Record:
        """Create a comment.

        Either reply to an existing comment (body, in_reply_to) or comment on
        a diff line (body, commit_id, path, position).
        """
        ctx = self._set_context(owner, repo)
        assert_presence_of(number=number)
        params = filter_known(VALID_REQUEST_PARAM_NAMES, normalize(params))
        if "in_reply_to" in params:
            assert_required_keys(REPLY_PARAMS, params)
        else:
            assert_required_keys(POSITIONED_PARAMS, params)

        return self.executor.post(
            f"/repos/{ctx.owner}/{ctx.repository}/pulls/{number}/comments", params
        )

    def update(
        self,
        owner: str | None,
        repo: str | None,
        comment_id: int | str,
        params: Mapping[str, Any] | None = None,
    ) -> Record:
        ctx = self._set_context(owner, repo)
        assert_presence_of(comment_id=comment_id)
        params = filter_known(VALID_REQUEST_PARAM_NAMES, normalize(params))
        assert_required_keys(("body",), params)

        return self.executor.patch(
            f"/repos/{ctx.owner}/{ctx.repository}/pulls/comments/{comment_id}", params
        )

    def delete(
        self,
        owner: str | None,
        repo: str | None,
        comment_id: int | str,
        params: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = self._set_context(owner, repo)
        assert_presence_of(comment_id=comment_id)
        params = normalize(params)

        self.executor.delete(
            f"/repos/{ctx.owner}/{ctx.repository}/pulls/comments/{comment_id}", params
        )

    remove = delete
