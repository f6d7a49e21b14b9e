"""CLI parser construction."""

from __future__ import annotations

import argparse
from datetime import date
from importlib.metadata import PackageNotFoundError, version

from mergedprs.github.fetcher import DEFAULT_LIMIT


def _package_version() -> str:
    try:
        return version("mergedprs")
    except PackageNotFoundError:
        return "0.0.0"


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}; use YYYY-MM-DD") from exc


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer {value!r}") from exc
    if parsed < 1:
        raise argparse.ArgumentTypeError("limit must be at least 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mergedprs")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument("--config", default=None, help="Path to a mergedprs JSON config file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    auth_parser = subparsers.add_parser("auth", help="Resolve the GitHub credential in use")
    auth_parser.add_argument(
        "--optional",
        action="store_true",
        help="Report an empty credential instead of failing when no token is found",
    )
    auth_parser.add_argument("--show-token", action="store_true", help="Print the token instead of a masked value")
    auth_parser.add_argument("--json", action="store_true", help="Print JSON output")

    fetch_parser = subparsers.add_parser("fetch", help="List merged pull requests by an author")
    fetch_parser.add_argument("author", help="GitHub login of the pull request author")
    fetch_parser.add_argument(
        "--since",
        required=True,
        type=_parse_date,
        help="Only include pull requests merged on or after this date (YYYY-MM-DD)",
    )
    fetch_parser.add_argument("--org", default=None, help="GitHub organization (default: from config)")
    fetch_parser.add_argument(
        "--limit",
        type=_positive_int,
        default=DEFAULT_LIMIT,
        help=f"Maximum number of pull requests to fetch (default: {DEFAULT_LIMIT})",
    )
    fetch_parser.add_argument("--json", action="store_true", help="Print JSON output")

    tools_parser = subparsers.add_parser("tools", help="List agent tools and their schemas")
    tools_parser.add_argument("--json", action="store_true", help="Print full JSON schemas")

    return parser


__all__ = ["build_parser"]
