"""Fetch command."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table

from mergedprs.config import MergedPrsConfig
from mergedprs.github.fetcher import PullRequestFetcher
from mergedprs.models import SearchResult


def build_table(result: SearchResult) -> Table:
    table = Table()
    table.add_column("Merged", no_wrap=True)
    table.add_column("Repository", style="cyan")
    table.add_column("Title")
    table.add_column("URL", style="blue")
    for pr in result.pull_requests:
        table.add_row(pr.merged_at.date().isoformat(), pr.repository.name, pr.title, pr.url)
    return table


async def run_fetch(
    args: argparse.Namespace,
    config: MergedPrsConfig,
    *,
    console: Console | None = None,
) -> SearchResult:
    fetcher = PullRequestFetcher(config=config)
    result = await fetcher.fetch(args.author, merged_after=args.since, organization=args.org, limit=args.limit)

    if args.json:
        print(result.model_dump_json(by_alias=True, indent=2))
        return result

    org = args.org if args.org is not None else config.default_organization
    out = console or Console()
    out.print(f"Merged PRs by {args.author} in {org} since {args.since.isoformat()}", markup=False)
    out.print(build_table(result))
    out.print(f"{result.total_count} shown, {result.issue_count} matched")
    return result
