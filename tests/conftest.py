"""Shared test fixtures for mergedprs tests."""

from __future__ import annotations

from typing import Any

import pytest

from mergedprs.auth.resolver import CredentialResolver
from mergedprs.auth.resolvers.static import StaticTokenResolver
from mergedprs.models import CredentialSource
from tests.fakes.gh import FakeAccountReader, FakeGh


@pytest.fixture(autouse=True)
def _no_github_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)


@pytest.fixture
def fake_gh(monkeypatch: pytest.MonkeyPatch) -> FakeGh:
    """Replace subprocess creation with a scriptable fake ``gh``."""
    gh = FakeGh()
    monkeypatch.setattr("asyncio.create_subprocess_exec", gh)
    return gh


@pytest.fixture
def static_resolver() -> CredentialResolver:
    return CredentialResolver(
        sources=[(CredentialSource.STATIC, StaticTokenResolver(token="tok_123"))],
        account_reader=FakeAccountReader(),
    )


@pytest.fixture
def pr_nodes() -> list[dict[str, Any]]:
    """Three merged pull request nodes, newest first."""
    return [
        {
            "title": "Add login page",
            "url": "https://github.com/acme/web/pull/1",
            "mergedAt": "2024-03-01T10:00:00Z",
            "repository": {"name": "web"},
        },
        {
            "title": "Fix flaky test",
            "url": "https://github.com/acme/api/pull/7",
            "mergedAt": "2024-02-20T08:30:00Z",
            "repository": {"name": "api"},
        },
        {
            "title": "Bump dependencies",
            "url": "https://github.com/acme/web/pull/3",
            "mergedAt": "2024-02-02T16:45:00Z",
            "repository": {"name": "web"},
        },
    ]
