"""Environment token resolver."""

from __future__ import annotations

import os
from dataclasses import dataclass

from mergedprs.auth.base import TokenResolver
from mergedprs.config import DEFAULT_TOKEN_ENV_VAR
from mergedprs.exceptions import CredentialError


@dataclass(frozen=True)
class EnvTokenResolver(TokenResolver):
    variable: str = DEFAULT_TOKEN_ENV_VAR

    async def resolve(self) -> str:
        token = (os.getenv(self.variable) or "").strip()
        if not token:
            raise CredentialError(f"{self.variable} is not set or empty")
        return token
