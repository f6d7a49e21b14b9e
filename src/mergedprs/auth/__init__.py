"""Auth module public exports."""

from mergedprs.auth.account import GhCliAccountReader, parse_auth_status, parse_auth_status_json
from mergedprs.auth.base import AccountInfoReader, TokenResolver
from mergedprs.auth.factory import create_credential_resolver
from mergedprs.auth.resolver import CredentialResolver
from mergedprs.auth.resolvers import EnvTokenResolver, GhCliTokenResolver, StaticTokenResolver

__all__ = [
    "AccountInfoReader",
    "CredentialResolver",
    "EnvTokenResolver",
    "GhCliAccountReader",
    "GhCliTokenResolver",
    "StaticTokenResolver",
    "TokenResolver",
    "create_credential_resolver",
    "parse_auth_status",
    "parse_auth_status_json",
]
