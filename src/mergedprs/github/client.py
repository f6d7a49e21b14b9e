"""Async GitHub GraphQL client over httpx."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from mergedprs.config import DEFAULT_GRAPHQL_URL
from mergedprs.exceptions import RequestError, ResponseShapeError

_LOG = logging.getLogger(__name__)


def github_headers(token: str) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {token}",
        "Accept": "application/json",
        "Content-Type": "application/json",
        "User-Agent": "mergedprs",
    }


class GitHubGraphQLClient:
    """Posts GraphQL documents to GitHub with a bearer token.

    Use as an async context manager so the underlying connection pool is closed::

        async with GitHubGraphQLClient(token=token) as client:
            payload = await client.execute(query, {"first": 10})
    """

    def __init__(
        self,
        *,
        token: str,
        url: str = DEFAULT_GRAPHQL_URL,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._token = token
        self._url = url
        self._timeout = timeout
        self._transport = transport
        self._http: httpx.AsyncClient | None = None

    async def __aenter__(self) -> GitHubGraphQLClient:
        self._http = httpx.AsyncClient(
            headers=github_headers(self._token),
            timeout=self._timeout,
            transport=self._transport,
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    async def execute(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """Send one GraphQL request and return the decoded JSON body.

        Raises:
            RequestError: If GitHub answers with a non-2xx status.
            ResponseShapeError: If the body is not a JSON object.
        """
        if self._http is None:
            raise RuntimeError("GitHubGraphQLClient is not open; use 'async with'")

        _LOG.debug("POST %s", self._url)
        response = await self._http.post(self._url, json={"query": query, "variables": variables or {}})
        if not response.is_success:
            raise RequestError(response.status_code, response.reason_phrase)

        try:
            payload = response.json()
        except ValueError as exc:
            raise ResponseShapeError("GitHub API returned a non-JSON response") from exc
        if not isinstance(payload, dict):
            raise ResponseShapeError("Invalid response structure from GitHub API")
        return payload
