"""Configuration model and loader."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, model_validator

from mergedprs.exceptions import ConfigError

DEFAULT_HOSTNAME = "github.com"
DEFAULT_GRAPHQL_URL = "https://api.github.com/graphql"
DEFAULT_ORGANIZATION = "Anti-Pattern-Inc"
DEFAULT_TOKEN_ENV_VAR = "GITHUB_TOKEN"

AUTH_MODES = ("auto", "gh-cli", "env", "token")


class MergedPrsConfig(BaseModel):
    auth: str = "auto"
    token: str | None = None
    hostname: str = DEFAULT_HOSTNAME
    token_env_var: str = DEFAULT_TOKEN_ENV_VAR
    graphql_url: str | None = None
    default_organization: str = DEFAULT_ORGANIZATION
    timeout: float = Field(default=10.0, gt=0)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_auth_token(self) -> MergedPrsConfig:
        if self.auth not in AUTH_MODES:
            raise ValueError(f"auth must be one of: {', '.join(AUTH_MODES)}")
        token = (self.token or "").strip()
        if self.auth == "token":
            if not token:
                raise ValueError("token auth requires a non-empty token")
            return self
        if token:
            raise ValueError("token must be unset when auth is not 'token'")
        return self

    @property
    def endpoint(self) -> str:
        """GraphQL endpoint URL, derived from the hostname unless set explicitly."""
        if self.graphql_url:
            return self.graphql_url
        if self.hostname == DEFAULT_HOSTNAME:
            return DEFAULT_GRAPHQL_URL
        # GitHub Enterprise Server serves GraphQL under /api/graphql.
        return f"https://{self.hostname}/api/graphql"


def load_config(path: str | Path) -> MergedPrsConfig:
    config_path = Path(path).expanduser().resolve()

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        return MergedPrsConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc
