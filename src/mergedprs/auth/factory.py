"""Credential resolver factory."""

from __future__ import annotations

from mergedprs.auth.account import GhCliAccountReader
from mergedprs.auth.resolver import CredentialResolver, TokenSource
from mergedprs.auth.resolvers.env import EnvTokenResolver
from mergedprs.auth.resolvers.gh_cli import GhCliTokenResolver
from mergedprs.auth.resolvers.static import StaticTokenResolver
from mergedprs.config import MergedPrsConfig
from mergedprs.exceptions import ConfigError
from mergedprs.models import CredentialSource


def create_credential_resolver(config: MergedPrsConfig | None = None) -> CredentialResolver:
    config = config or MergedPrsConfig()
    cli: TokenSource = (CredentialSource.CLI, GhCliTokenResolver(hostname=config.hostname))
    env: TokenSource = (CredentialSource.ENVIRONMENT, EnvTokenResolver(variable=config.token_env_var))

    if config.auth == "auto":
        sources = [cli, env]
    elif config.auth == "gh-cli":
        sources = [cli]
    elif config.auth == "env":
        sources = [env]
    elif config.auth == "token":
        sources = [(CredentialSource.STATIC, StaticTokenResolver(token=config.token or ""))]
    else:
        raise ConfigError(f"Unknown auth mode: {config.auth}")

    return CredentialResolver(
        sources=sources,
        account_reader=GhCliAccountReader(hostname=config.hostname),
        token_env_var=config.token_env_var,
    )
