"""Search query construction for GitHub issue/PR search."""

from __future__ import annotations

import re
from datetime import date, datetime

_NEEDS_QUOTING = re.compile(r"[\s\"':()\\]")


def quote_qualifier_value(value: str) -> str:
    """Return *value* in a form safe to use after a search qualifier.

    Plain logins and organization names pass through unchanged. Anything with
    whitespace, quotes, colons, parentheses or backslashes is escaped and
    wrapped in double quotes so it cannot add qualifiers of its own.
    """
    if not _NEEDS_QUOTING.search(value):
        return value
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def build_search_query(author: str, organization: str, merged_after: date) -> str:
    """Build the search expression for merged PRs by *author* in *organization*.

    ``merged_after`` is an inclusive lower bound.

    Raises:
        ValueError: If *author* or *organization* is empty.
    """
    author = author.strip()
    organization = organization.strip()
    if not author:
        raise ValueError("author must be a non-empty GitHub login")
    if not organization:
        raise ValueError("organization must be a non-empty GitHub organization")

    parts = [
        f"author:{quote_qualifier_value(author)}",
        f"org:{quote_qualifier_value(organization)}",
        "is:pr",
        f"merged:>={_as_date(merged_after).isoformat()}",
    ]
    return " ".join(parts)
