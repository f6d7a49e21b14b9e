"""Merged pull request search."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

import httpx
from pydantic import ValidationError

from mergedprs.auth.factory import create_credential_resolver
from mergedprs.auth.resolver import CredentialResolver
from mergedprs.config import MergedPrsConfig
from mergedprs.exceptions import FetchError, ResponseShapeError
from mergedprs.github.client import GitHubGraphQLClient
from mergedprs.github.queries import SEARCH_MERGED_PULL_REQUESTS
from mergedprs.github.search import build_search_query
from mergedprs.models import PullRequest, SearchResult

_LOG = logging.getLogger(__name__)

DEFAULT_LIMIT = 100

_INVALID_STRUCTURE = "Invalid response structure from GitHub API"


def _graphql_error_messages(payload: dict[str, Any]) -> list[str]:
    errors = payload.get("errors")
    if not isinstance(errors, list):
        return []
    messages: list[str] = []
    for error in errors:
        if isinstance(error, dict) and error.get("message"):
            messages.append(str(error["message"]))
        else:
            messages.append(str(error))
    return messages


def parse_search_response(payload: dict[str, Any]) -> SearchResult:
    """Turn a GraphQL search payload into a :class:`SearchResult`.

    Raises:
        ResponseShapeError: If ``data.search.nodes`` is missing or malformed.
    """
    data = payload.get("data")
    search = data.get("search") if isinstance(data, dict) else None
    if not isinstance(search, dict):
        messages = _graphql_error_messages(payload)
        if messages:
            raise ResponseShapeError(f"{_INVALID_STRUCTURE}: {'; '.join(messages)}")
        raise ResponseShapeError(_INVALID_STRUCTURE)

    nodes = search.get("nodes")
    if not isinstance(nodes, list):
        raise ResponseShapeError(_INVALID_STRUCTURE)

    try:
        # Non-PR hits come back as empty objects from the PullRequest fragment.
        pull_requests = [PullRequest.model_validate(node) for node in nodes if node]
    except ValidationError as exc:
        raise ResponseShapeError(f"{_INVALID_STRUCTURE}: {exc}") from exc

    issue_count = search.get("issueCount")
    if not isinstance(issue_count, int):
        issue_count = len(pull_requests)

    return SearchResult(
        pull_requests=pull_requests,
        total_count=len(pull_requests),
        issue_count=issue_count,
    )


class PullRequestFetcher:
    """Fetches one page of merged pull requests for an author in an organization."""

    def __init__(
        self,
        *,
        resolver: CredentialResolver | None = None,
        config: MergedPrsConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or MergedPrsConfig()
        self._resolver = resolver or create_credential_resolver(self._config)
        self._transport = transport

    async def fetch(
        self,
        author: str,
        *,
        merged_after: date,
        organization: str | None = None,
        limit: int = DEFAULT_LIMIT,
    ) -> SearchResult:
        """Fetch merged pull requests, newest matches first as GitHub orders them.

        Inputs are validated before any I/O.

        Raises:
            FetchError: If the inputs are invalid, or resolving the token, the request, or parsing fails.
        """
        org = organization if organization is not None else self._config.default_organization
        try:
            if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
                raise ValueError(f"limit must be a positive integer, got {limit!r}")
            search_query = build_search_query(author, org, merged_after)

            token = await self._resolver.get_token()
            _LOG.debug("Searching GitHub: %s (first %d)", search_query, limit)
            async with GitHubGraphQLClient(
                token=token,
                url=self._config.endpoint,
                timeout=self._config.timeout,
                transport=self._transport,
            ) as client:
                payload = await client.execute(
                    SEARCH_MERGED_PULL_REQUESTS,
                    {"searchQuery": search_query, "first": limit},
                )
            result = parse_search_response(payload)
        except Exception as exc:
            raise FetchError(f"Failed to fetch pull requests: {str(exc) or type(exc).__name__}") from exc

        _LOG.info("Fetched %d merged pull requests for %s in %s", result.total_count, author, org)
        return result
