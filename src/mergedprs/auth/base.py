"""Credential source interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod

from mergedprs.models import AccountInfo


class TokenResolver(ABC):
    @abstractmethod
    async def resolve(self) -> str:
        """Resolve and return an authentication token.

        Raises:
            CredentialError: If this source cannot supply a non-empty token.
        """


class AccountInfoReader(ABC):
    @abstractmethod
    async def read(self) -> AccountInfo:
        """Return the username and token scopes of the active account."""
