"""Convenience entry points for library callers."""

from __future__ import annotations

from datetime import date

from mergedprs.auth.factory import create_credential_resolver
from mergedprs.config import MergedPrsConfig
from mergedprs.github.fetcher import DEFAULT_LIMIT, PullRequestFetcher
from mergedprs.models import Credential, SearchResult


async def resolve_credential(*, require_token: bool = True, config: MergedPrsConfig | None = None) -> Credential:
    """Resolve a GitHub credential with account metadata."""
    return await create_credential_resolver(config).resolve(require_token=require_token)


async def get_token(config: MergedPrsConfig | None = None) -> str:
    """Resolve a GitHub token, raising ``CredentialError`` if none is available."""
    return await create_credential_resolver(config).get_token()


async def fetch_pull_requests(
    author: str,
    *,
    merged_after: date,
    organization: str | None = None,
    limit: int = DEFAULT_LIMIT,
    config: MergedPrsConfig | None = None,
) -> SearchResult:
    """Fetch merged pull requests by *author* in *organization* since *merged_after*."""
    fetcher = PullRequestFetcher(config=config)
    return await fetcher.fetch(author, merged_after=merged_after, organization=organization, limit=limit)
