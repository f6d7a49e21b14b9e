"""``github-auth`` tool."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from mergedprs.auth.factory import create_credential_resolver
from mergedprs.auth.resolver import CredentialResolver
from mergedprs.config import MergedPrsConfig
from mergedprs.models import Credential
from mergedprs.tools.base import Tool

DESCRIPTION = (
    "Get GitHub authentication token from the GitHub CLI or the GITHUB_TOKEN environment variable. "
    "If no token is found and one is required, an error is raised. "
    "Otherwise returns the token, username, scopes, and source."
)


class GithubAuthInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    require_token: bool = Field(
        default=True,
        alias="requireToken",
        description="Whether to throw error if no token is found",
    )


def create_github_auth_tool(
    *,
    resolver: CredentialResolver | None = None,
    config: MergedPrsConfig | None = None,
) -> Tool[GithubAuthInput, Credential]:
    active_resolver = resolver or create_credential_resolver(config)

    async def execute(context: GithubAuthInput) -> Credential:
        return await active_resolver.resolve(require_token=context.require_token)

    return Tool(
        id="github-auth",
        description=DESCRIPTION,
        input_model=GithubAuthInput,
        output_model=Credential,
        execute=execute,
    )
