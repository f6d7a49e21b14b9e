"""GitHub GraphQL access for merged pull requests."""

from mergedprs.github.client import GitHubGraphQLClient
from mergedprs.github.fetcher import PullRequestFetcher, parse_search_response
from mergedprs.github.search import build_search_query, quote_qualifier_value

__all__ = [
    "GitHubGraphQLClient",
    "PullRequestFetcher",
    "build_search_query",
    "parse_search_response",
    "quote_qualifier_value",
]
