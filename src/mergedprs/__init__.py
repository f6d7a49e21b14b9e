"""Public API surface for mergedprs."""

from mergedprs.auth import CredentialResolver, create_credential_resolver
from mergedprs.config import MergedPrsConfig, load_config
from mergedprs.exceptions import (
    ConfigError,
    CredentialError,
    FetchError,
    MergedPrsError,
    RequestError,
    ResponseShapeError,
    ToolInputError,
)
from mergedprs.github import PullRequestFetcher, build_search_query
from mergedprs.models import Credential, CredentialSource, PullRequest, Repository, SearchResult
from mergedprs.sdk import fetch_pull_requests, get_token, resolve_credential

__all__ = [
    "ConfigError",
    "Credential",
    "CredentialError",
    "CredentialResolver",
    "CredentialSource",
    "FetchError",
    "MergedPrsConfig",
    "MergedPrsError",
    "PullRequest",
    "PullRequestFetcher",
    "Repository",
    "RequestError",
    "ResponseShapeError",
    "SearchResult",
    "ToolInputError",
    "build_search_query",
    "create_credential_resolver",
    "fetch_pull_requests",
    "get_token",
    "load_config",
    "resolve_credential",
]
