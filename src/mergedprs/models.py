"""Data models shared by the resolver, the fetcher and the tools.

Field names are snake_case in Python; the camelCase aliases match the GitHub
GraphQL payload and the tool output schemas.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class CredentialSource(StrEnum):
    """Which mechanism supplied the active token."""

    ENVIRONMENT = "environment"
    CLI = "github-cli"
    STATIC = "static"


class Credential(BaseModel):
    """A resolved GitHub credential. Created per resolution, never persisted."""

    model_config = ConfigDict(frozen=True)

    token: str = Field(default="", repr=False, description="GitHub authentication token")
    username: str = Field(default="", description="GitHub username")
    scopes: list[str] = Field(default_factory=list, description="Token scopes")
    source: CredentialSource = Field(default=CredentialSource.CLI, description="Source of the token")


class AccountInfo(BaseModel):
    """Account metadata read from ``gh auth status``."""

    model_config = ConfigDict(frozen=True)

    username: str = ""
    scopes: list[str] = Field(default_factory=list)


class Repository(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="The repository name")


class PullRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = Field(description="The title of the pull request")
    url: str = Field(description="The URL of the pull request")
    merged_at: datetime = Field(alias="mergedAt", description="When the pull request was merged")
    repository: Repository = Field(description="Repository information")


class SearchResult(BaseModel):
    """One page of merged pull requests.

    ``total_count`` is the number of pull requests returned in this page;
    ``issue_count`` is the total number of matches GitHub reports for the query.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    pull_requests: list[PullRequest] = Field(
        default_factory=list, alias="pullRequests", description="Array of pull requests"
    )
    total_count: int = Field(default=0, alias="totalCount", description="Number of pull requests returned")
    issue_count: int = Field(
        default=0, alias="issueCount", description="Total number of matches reported by GitHub"
    )
