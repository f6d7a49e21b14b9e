"""Token supplied directly through configuration (``auth: token``)."""

from __future__ import annotations

from dataclasses import dataclass, field

from mergedprs.auth.base import TokenResolver
from mergedprs.exceptions import CredentialError


@dataclass(frozen=True)
class StaticTokenResolver(TokenResolver):
    token: str = field(repr=False)

    async def resolve(self) -> str:
        token = self.token.strip()
        if not token:
            raise CredentialError("Configured token is empty; set 'token' or choose another auth mode")
        return token
