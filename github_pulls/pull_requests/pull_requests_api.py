"""Pull Requests API."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from github_pulls.api_factory import create_api
from github_pulls.errors import NotFound, RemoteError
from github_pulls.models import MergeCheck, MergeStatus, RequestContext
from github_pulls.pull_requests.common import (
    Callback,
    Record,
    Records,
    each_element,
    resolve_context,
)
from github_pulls.validation import (
    assert_presence_of,
    assert_valid_values,
    filter_known,
    normalize,
)

if TYPE_CHECKING:
    from github_pulls.pull_requests.comments import PullRequestCommentsAPI
    from github_pulls.request_executors.abstract_request_executor import (
        AbstractRequestExecutor,
    )

logger = logging.getLogger(__name__)

VALID_REQUEST_PARAM_NAMES = frozenset(
    {
        "title",
        "body",
        "base",
        "head",
        "state",
        "issue",
        "commit_message",
        "mime_type",
        "resource",
        "client_id",
        "client_secret",
    }
)

VALID_REQUEST_PARAM_VALUES = {
    "state": ("open", "closed"),
}


class PullRequestsAPI:
    """Access to the pull requests of a repository.

    Examples:
        pulls = PullRequestsAPI(HttpRequestExecutor(), user="octocat", repo="hello-world")
        pulls.list()
        pulls.list("octocat", "hello-world", {"state": "closed"}, callback=print)
        pulls.get("octocat", "hello-world", 42)

    """

    def __init__(
        self,
        executor: AbstractRequestExecutor,
        user: str | None = None,
        repo: str | None = None,
    ):
        self.executor = executor
        self.user = user
        self.repo = repo
        self.context = RequestContext()
        self._comments: PullRequestCommentsAPI | None = None
        self._comments_lock = threading.Lock()

    @property
    def comments(self) -> PullRequestCommentsAPI:
        """Review comments API, built on first access and reused afterwards.

        Calls that omit owner/repository use the repository this endpoint
        last worked on, or its defaults.
        """
        if self._comments is None:
            with self._comments_lock:
                if self._comments is None:
                    self._comments = create_api(
                        "pull_requests.comments",
                        self.executor,
                        user=self.user,
                        repo=self.repo,
                        parent=self,
                    )
        return self._comments

    def _set_context(self, owner: str | None, repo: str | None) -> RequestContext:
        self.context = resolve_context(owner, repo, self.user, self.repo)
        return self.context

    def list(
        self,
        owner: str | None = None,
        repo: str | None = None,
        params: Mapping[str, Any] | None = None,
        callback: Callback | None = None,
    ) -> Records | None:
        """List pull requests.

        Supported params: state (open, closed), head, base.
        When callback is given it receives every pull request in order and
        nothing is returned.
        """
        ctx = self._set_context(owner, repo)
        params = filter_known(VALID_REQUEST_PARAM_NAMES, normalize(params))
        assert_valid_values(VALID_REQUEST_PARAM_VALUES, params)

        response = self.executor.get(f"/repos/{ctx.owner}/{ctx.repository}/pulls", params)
        return each_element(response, callback)

    all = list

    def get(
        self,
        owner: str | None,
        repo: str | None,
        number: int | str,
        params: Mapping[str, Any] | None = None,
    ) -> Record:
        """Get a single pull request."""
        ctx = self._set_context(owner, repo)
        assert_presence_of(number=number)
        params = normalize(params)

        return self.executor.get(f"/repos/{ctx.owner}/{ctx.repository}/pulls/{number}", params)

    find = get

    def create(
        self,
        owner: str | None,
        repo: str | None,
        params: Mapping[str, Any] | None = None,
    ) -> Record:
        """Create a pull request.

        Params are either title, body, head and base, or issue, head and base
        to turn an existing issue into a pull request. head and base can be a
        branch name or a sha; head is usually namespaced as "user:branch".
        """
        ctx = self._set_context(owner, repo)
        params = filter_known(VALID_REQUEST_PARAM_NAMES, normalize(params))

        return self.executor.post(f"/repos/{ctx.owner}/{ctx.repository}/pulls", params)

    def update(
        self,
        owner: str | None,
        repo: str | None,
        number: int | str,
        params: Mapping[str, Any] | None = None,
    ) -> Record:
        """Update the title, body or state (open, closed) of a pull request."""
        ctx = self._set_context(owner, repo)
        assert_presence_of(number=number)
        params = filter_known(VALID_REQUEST_PARAM_NAMES, normalize(params))
        assert_valid_values(VALID_REQUEST_PARAM_VALUES, params)

        return self.executor.patch(f"/repos/{ctx.owner}/{ctx.repository}/pulls/{number}", params)

    def commits(
        self,
        owner: str | None,
        repo: str | None,
        number: int | str,
        params: Mapping[str, Any] | None = None,
        callback: Callback | None = None,
    ) -> Records | None:
        """List commits on a pull request."""
        ctx = self._set_context(owner, repo)
        assert_presence_of(number=number)
        params = normalize(params)

        response = self.executor.get(
            f"/repos/{ctx.owner}/{ctx.repository}/pulls/{number}/commits", params
        )
        return each_element(response, callback)

    def files(
        self,
        owner: str | None,
        repo: str | None,
        number: int | str,
        params: Mapping[str, Any] | None = None,
        callback: Callback | None = None,
    ) -> Records | None:
        """List files changed by a pull request."""
        ctx = self._set_context(owner, repo)
        assert_presence_of(number=number)
        params = normalize(params)

        response = self.executor.get(
            f"/repos/{ctx.owner}/{ctx.repository}/pulls/{number}/files", params
        )
        return each_element(response, callback)

    def merge_status(
        self,
        owner: str | None,
        repo: str | None,
        number: int | str,
        params: Mapping[str, Any] | None = None,
    ) -> MergeCheck:
        """Check whether a pull request has been merged.

        A 404 from the merge endpoint means "not merged"; any other remote
        failure is reported as MergeStatus.ERROR with the error attached.
        """
        ctx = self._set_context(owner, repo)
        assert_presence_of(number=number)
        params = normalize(params)

        try:
            self.executor.get(f"/repos/{ctx.owner}/{ctx.repository}/pulls/{number}/merge", params)
        except NotFound:
            return MergeCheck(status=MergeStatus.NOT_MERGED)
        except RemoteError as e:
            logger.debug(f"Merge check for {ctx.owner}/{ctx.repository}#{number} failed: {e}")
            return MergeCheck(status=MergeStatus.ERROR, error=e)
        return MergeCheck(status=MergeStatus.MERGED)

    def is_merged(
        self,
        owner: str | None,
        repo: str | None,
        number: int | str,
        params: Mapping[str, Any] | None = None,
    ) -> bool:
        """Return True if merged, False if not; other remote errors are raised."""
        return self.merge_status(owner, repo, number, params).to_bool()

    def merge(
        self,
        owner: str | None,
        repo: str | None,
        number: int | str,
        params: Mapping[str, Any] | None = None,
    ) -> Record:
        """Merge a pull request, optionally with a commit_message."""
        ctx = self._set_context(owner, repo)
        assert_presence_of(number=number)
        params = filter_known(VALID_REQUEST_PARAM_NAMES, normalize(params))

        return self.executor.put(f"/repos/{ctx.owner}/{ctx.repository}/pulls/{number}/merge", params)
