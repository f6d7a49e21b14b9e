from datetime import date, datetime, timezone

import pytest

from mergedprs.github.search import build_search_query, quote_qualifier_value


def test_builds_query_with_all_qualifiers() -> None:
    query = build_search_query("alice", "acme", date(2024, 1, 15))

    assert query == "author:alice org:acme is:pr merged:>=2024-01-15"


def test_datetime_is_reduced_to_date() -> None:
    query = build_search_query("alice", "acme", datetime(2024, 1, 15, 23, 59, tzinfo=timezone.utc))

    assert query.endswith("merged:>=2024-01-15")


def test_author_and_organization_are_trimmed() -> None:
    assert build_search_query(" alice ", " acme\n", date(2024, 1, 1)).startswith("author:alice org:acme ")


@pytest.mark.parametrize(("author", "organization"), [("", "acme"), ("   ", "acme"), ("alice", "")])
def test_rejects_empty_author_or_organization(author: str, organization: str) -> None:
    with pytest.raises(ValueError):
        build_search_query(author, organization, date(2024, 1, 1))


def test_injected_qualifiers_are_quoted() -> None:
    query = build_search_query("alice is:issue", "acme", date(2024, 1, 1))

    assert query == 'author:"alice is:issue" org:acme is:pr merged:>=2024-01-01'


def test_quotes_and_backslashes_are_escaped() -> None:
    assert quote_qualifier_value('a"b') == '"a\\"b"'
    assert quote_qualifier_value("a\\b") == '"a\\\\b"'


def test_plain_values_pass_through() -> None:
    assert quote_qualifier_value("dependabot-bot") == "dependabot-bot"
