"""Auth command."""

from __future__ import annotations

import argparse
import json

from mergedprs.auth.factory import create_credential_resolver
from mergedprs.config import MergedPrsConfig
from mergedprs.models import Credential


def mask_token(token: str) -> str:
    if not token:
        return ""
    if len(token) <= 8:
        return "*" * len(token)
    return f"{token[:4]}{'*' * (len(token) - 8)}{token[-4:]}"


def format_credential(credential: Credential, *, show_token: bool = False) -> str:
    token = credential.token if show_token else mask_token(credential.token)
    lines = [
        "",
        "mergedprs - GitHub credential",
        "",
        f"  Source:    {credential.source.value}",
        f"  Username:  {credential.username or '-'}",
        f"  Scopes:    {', '.join(credential.scopes) or '-'}",
        f"  Token:     {token or '-'}",
        "",
    ]
    return "\n".join(lines)


async def run_auth(args: argparse.Namespace, config: MergedPrsConfig) -> Credential:
    resolver = create_credential_resolver(config)
    credential = await resolver.resolve(require_token=not args.optional)
    if args.json:
        payload = credential.model_dump(mode="json")
        if not args.show_token:
            payload["token"] = mask_token(credential.token)
        print(json.dumps(payload, indent=2))
    else:
        print(format_credential(credential, show_token=args.show_token))
    return credential
