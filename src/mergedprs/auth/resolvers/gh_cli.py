"""Token from the GitHub CLI's stored login."""

from __future__ import annotations

from dataclasses import dataclass

from mergedprs.auth.base import TokenResolver
from mergedprs.auth.gh import run_gh
from mergedprs.config import DEFAULT_HOSTNAME
from mergedprs.exceptions import CredentialError


@dataclass(frozen=True)
class GhCliTokenResolver(TokenResolver):
    """Reads the token ``gh auth token`` prints for *hostname*.

    Any failure (``gh`` missing, not logged in, blank output) is a
    :class:`CredentialError` so the resolver chain can move on.
    """

    hostname: str = DEFAULT_HOSTNAME

    async def resolve(self) -> str:
        try:
            output = await run_gh("auth", "token", "--hostname", self.hostname)
        except OSError as exc:
            raise CredentialError(f"Failed to execute gh CLI: {exc}") from exc

        if not output.ok:
            reason = output.stderr.strip() or f"exit status {output.returncode}"
            raise CredentialError(f"gh auth token failed for host {self.hostname}: {reason}")

        token = output.stdout.strip()
        if not token:
            raise CredentialError(f"gh auth token returned an empty token for host {self.hostname}")
        return token
