"""HTTP request executor backed by a requests session."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from typing_extensions import override

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from github_pulls.errors import NetworkError, RemoteError, error_for_status
from github_pulls.models import ClientConfig
from github_pulls.request_executors.abstract_request_executor import AbstractRequestExecutor

logger = logging.getLogger(__name__)

DEFAULT_ACCEPT = "application/vnd.github.v3+json"

# Always sent in the query string, whatever the verb
QUERY_ONLY_PARAMS = ("client_id", "client_secret")

# Media types returned as plain text rather than JSON
RAW_MEDIA_TYPES = ("diff", "patch")


class HttpRequestExecutor(AbstractRequestExecutor):
    """Executes API requests over HTTP."""

    def __init__(self, config: ClientConfig | None = None):
        self.config = config or ClientConfig()
        self.base_url = self.config.endpoint.rstrip("/")
        self.session = requests.Session()

        # Retry idempotent reads on throttling and server errors; the final
        # response is returned so its status can be mapped to an error.
        retry_strategy = Retry(
            total=self.config.max_retries,
            backoff_factor=self.config.backoff_factor,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET"],
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

        if self.config.token:
            self.session.headers.update({"Authorization": f"token {self.config.token}"})
        self.session.headers.update(
            {"Accept": DEFAULT_ACCEPT, "User-Agent": self.config.user_agent}
        )

    @override
    def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        response = self._request("GET", path, params)
        data = self._parse(response)

        if self.config.auto_pagination and isinstance(data, list):
            headers = self._media_type_headers(dict(params or {}))
            while "next" in response.links:
                next_url = response.links["next"]["url"]
                logger.debug(f"Following next page: {next_url}")
                response = self._send("GET", next_url, headers=headers)
                page = self._parse(response)
                if not page:
                    break
                data.extend(page)
        return data

    @override
    def post(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return self._parse(self._request("POST", path, params))

    @override
    def patch(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return self._parse(self._request("PATCH", path, params))

    @override
    def put(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return self._parse(self._request("PUT", path, params))

    @override
    def delete(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return self._parse(self._request("DELETE", path, params))

    def _request(
        self, method: str, path: str, params: Mapping[str, Any] | None
    ) -> requests.Response:
        """Split params into query, body and headers, then send."""
        remaining = dict(params or {})
        headers = self._media_type_headers(remaining)

        query = {key: remaining.pop(key) for key in QUERY_ONLY_PARAMS if key in remaining}
        body: dict[str, Any] | None = None
        if method in ("GET", "DELETE"):
            query.update(remaining)
            if method == "GET" and self.config.per_page and "per_page" not in query:
                query["per_page"] = self.config.per_page
        elif remaining:
            body = remaining

        return self._send(method, f"{self.base_url}{path}", query=query, body=body, headers=headers)

    def _send(
        self,
        method: str,
        url: str,
        query: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> requests.Response:
        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(
                method,
                url,
                params=query or None,
                json=body,
                headers=headers or None,
                timeout=self.config.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise NetworkError(str(e)) from e

        if not response.ok:
            error = self._error_from(response)
            logger.warning(f"{method} {url} returned {response.status_code}: {error.message}")
            raise error
        return response

    @staticmethod
    def _media_type_headers(params: dict[str, Any]) -> dict[str, str]:
        """Consume mime_type/resource from params and build the Accept header."""
        mime_type = params.pop("mime_type", None)
        resource = params.pop("resource", None)
        if not mime_type:
            return {}
        if mime_type in RAW_MEDIA_TYPES:
            return {"Accept": f"application/vnd.github.v3.{mime_type}"}
        if resource:
            return {"Accept": f"application/vnd.github-{resource}.{mime_type}+json"}
        return {"Accept": f"application/vnd.github.v3.{mime_type}+json"}

    @staticmethod
    def _parse(response: requests.Response) -> Any:
        if response.status_code == 204 or not response.content:
            return None
        if "json" in response.headers.get("Content-Type", ""):
            return response.json()
        return response.text

    @staticmethod
    def _error_from(response: requests.Response) -> RemoteError:
        body: Any = None
        message = response.reason or "Request failed"
        try:
            body = response.json()
        except ValueError:
            if response.text:
                message = response.text
        if isinstance(body, dict) and body.get("message"):
            message = body["message"]

        return error_for_status(
            response.status_code,
            message,
            body,
            rate_limit_remaining=response.headers.get("X-RateLimit-Remaining"),
        )
