"""Tests for the mergedprs exception hierarchy."""

from __future__ import annotations

from mergedprs.exceptions import (
    ConfigError,
    CredentialError,
    FetchError,
    MergedPrsError,
    RequestError,
    ResponseShapeError,
    ToolInputError,
)


class TestExceptionHierarchy:
    def test_all_exceptions_inherit_from_merged_prs_error(self) -> None:
        for exc_type in (ConfigError, CredentialError, FetchError, RequestError, ResponseShapeError, ToolInputError):
            assert issubclass(exc_type, MergedPrsError)

    def test_request_error_stores_status(self) -> None:
        exc = RequestError(403, "Forbidden")

        assert exc.status_code == 403
        assert exc.reason == "Forbidden"
        assert str(exc) == "GitHub API request failed: 403 Forbidden"

    def test_request_error_without_reason(self) -> None:
        assert str(RequestError(599, "")) == "GitHub API request failed: 599"
