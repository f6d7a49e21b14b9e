"""Custom exception hierarchy for mergedprs.

All mergedprs exceptions inherit from :class:`MergedPrsError`, so callers can
catch any library error with a single ``except`` clause while still handling
specific failure modes.
"""

from __future__ import annotations


class MergedPrsError(Exception):
    """Base exception for all mergedprs errors."""


class ConfigError(MergedPrsError):
    """Configuration loading or validation failure."""


class CredentialError(MergedPrsError):
    """Raised when no usable GitHub token can be resolved."""


class RequestError(MergedPrsError):
    """Raised when the GitHub API answers with a non-success status.

    Attributes:
        status_code: HTTP status code of the response.
        reason: HTTP reason phrase of the response.
    """

    def __init__(self, status_code: int, reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"GitHub API request failed: {status_code} {reason}".rstrip())


class ResponseShapeError(MergedPrsError):
    """Raised when a successful response does not have the expected JSON structure."""


class FetchError(MergedPrsError):
    """Raised when fetching pull requests fails for any reason."""


class ToolInputError(MergedPrsError):
    """Raised when a tool payload fails input validation."""
