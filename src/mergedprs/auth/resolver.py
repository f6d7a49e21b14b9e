"""Credential resolution across ordered token sources."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from mergedprs.auth.account import GhCliAccountReader
from mergedprs.auth.base import AccountInfoReader, TokenResolver
from mergedprs.auth.resolvers.env import EnvTokenResolver
from mergedprs.auth.resolvers.gh_cli import GhCliTokenResolver
from mergedprs.config import DEFAULT_TOKEN_ENV_VAR
from mergedprs.exceptions import CredentialError, MergedPrsError
from mergedprs.models import AccountInfo, Credential, CredentialSource

_LOG = logging.getLogger(__name__)

UNKNOWN = "unknown"

TokenSource = tuple[CredentialSource, TokenResolver]


def missing_token_message(token_env_var: str = DEFAULT_TOKEN_ENV_VAR) -> str:
    return (
        "No GitHub token found. Please either:\n"
        "1. Login with GitHub CLI: gh auth login (recommended), or\n"
        f"2. Set {token_env_var} environment variable"
    )


class CredentialResolver:
    """Resolves a GitHub token from the first source that yields one.

    The default order is the ``gh`` CLI followed by the ``GITHUB_TOKEN``
    environment variable. Sources and the account reader are injectable.
    """

    def __init__(
        self,
        *,
        sources: Sequence[TokenSource] | None = None,
        account_reader: AccountInfoReader | None = None,
        token_env_var: str = DEFAULT_TOKEN_ENV_VAR,
    ) -> None:
        if sources is None:
            sources = (
                (CredentialSource.CLI, GhCliTokenResolver()),
                (CredentialSource.ENVIRONMENT, EnvTokenResolver(variable=token_env_var)),
            )
        self._sources: tuple[TokenSource, ...] = tuple(sources)
        self._account_reader = account_reader or GhCliAccountReader()
        self._token_env_var = token_env_var

    @property
    def sources(self) -> tuple[TokenSource, ...]:
        return self._sources

    async def get_token(self) -> str:
        """Return a token from the first working source.

        Raises:
            CredentialError: If no source yields a token.
        """
        resolved = await self._first_token()
        if resolved is None:
            raise CredentialError(missing_token_message(self._token_env_var))
        return resolved[0]

    async def resolve(self, *, require_token: bool = True) -> Credential:
        """Resolve a credential with account metadata.

        When no source yields a token, raise :class:`CredentialError` if
        *require_token*, otherwise return an empty CLI credential.
        """
        resolved = await self._first_token()
        if resolved is None:
            if require_token:
                raise CredentialError(missing_token_message(self._token_env_var))
            return Credential(token="", username="", scopes=[], source=CredentialSource.CLI)

        token, source = resolved
        if source is CredentialSource.CLI:
            info = await self._read_account_info()
        else:
            # Deriving the account for a bare token would need an extra API call.
            info = AccountInfo(username=UNKNOWN, scopes=[UNKNOWN])

        return Credential(token=token, username=info.username, scopes=list(info.scopes), source=source)

    async def _first_token(self) -> tuple[str, CredentialSource] | None:
        for source, resolver in self._sources:
            try:
                token = await resolver.resolve()
            except CredentialError as exc:
                _LOG.debug("No token from %s: %s", source.value, exc)
                continue
            if source is CredentialSource.CLI:
                _LOG.info("Using GitHub CLI token")
            elif source is CredentialSource.ENVIRONMENT:
                _LOG.info("Using %s environment variable", self._token_env_var)
            else:
                _LOG.info("Using configured token")
            return token, source
        return None

    async def _read_account_info(self) -> AccountInfo:
        try:
            return await self._account_reader.read()
        except (OSError, ValueError, MergedPrsError) as exc:
            _LOG.warning("Could not retrieve GitHub account information: %s", exc)
            return AccountInfo()
