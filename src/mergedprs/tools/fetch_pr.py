"""``fetch-pr`` tool."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from mergedprs.config import DEFAULT_ORGANIZATION, MergedPrsConfig
from mergedprs.github.fetcher import DEFAULT_LIMIT, PullRequestFetcher
from mergedprs.models import SearchResult
from mergedprs.tools.base import Tool


class FetchPrInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    author: str = Field(min_length=1, description="The GitHub username of the PR author")
    organization: str = Field(default=DEFAULT_ORGANIZATION, min_length=1, description="The GitHub organization name")
    merged_after: date = Field(alias="mergedAfter", description="Date to filter PRs merged on or after this date")
    limit: int = Field(
        default=DEFAULT_LIMIT,
        ge=1,
        description=f"Maximum number of PRs to fetch (default: {DEFAULT_LIMIT})",
    )


def create_fetch_pr_tool(
    *,
    fetcher: PullRequestFetcher | None = None,
    config: MergedPrsConfig | None = None,
) -> Tool[FetchPrInput, SearchResult]:
    active_fetcher = fetcher or PullRequestFetcher(config=config)

    async def execute(context: FetchPrInput) -> SearchResult:
        return await active_fetcher.fetch(
            context.author,
            merged_after=context.merged_after,
            organization=context.organization,
            limit=context.limit,
        )

    return Tool(
        id="fetch-pr",
        description="Fetch merged pull requests from GitHub repositories",
        input_model=FetchPrInput,
        output_model=SearchResult,
        execute=execute,
    )
