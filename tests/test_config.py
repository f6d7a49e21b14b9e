from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from mergedprs.config import MergedPrsConfig, load_config
from mergedprs.exceptions import ConfigError


def test_defaults() -> None:
    config = MergedPrsConfig()

    assert config.auth == "auto"
    assert config.hostname == "github.com"
    assert config.token_env_var == "GITHUB_TOKEN"
    assert config.default_organization == "Anti-Pattern-Inc"
    assert config.endpoint == "https://api.github.com/graphql"


def test_enterprise_hostname_derives_endpoint() -> None:
    assert MergedPrsConfig(hostname="github.example.com").endpoint == "https://github.example.com/api/graphql"


def test_explicit_graphql_url_wins() -> None:
    config = MergedPrsConfig(hostname="github.example.com", graphql_url="http://localhost:8080/graphql")

    assert config.endpoint == "http://localhost:8080/graphql"


def test_token_auth_requires_token() -> None:
    with pytest.raises(ValidationError, match="non-empty token"):
        MergedPrsConfig(auth="token")


def test_token_rejected_for_other_auth_modes() -> None:
    with pytest.raises(ValidationError, match="token must be unset"):
        MergedPrsConfig(auth="env", token="tok_123")


def test_unknown_auth_mode_rejected() -> None:
    with pytest.raises(ValidationError, match="auth must be one of"):
        MergedPrsConfig(auth="oauth")


def test_timeout_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        MergedPrsConfig(timeout=0)


def test_load_config_reads_json(tmp_path: Path) -> None:
    path = tmp_path / "mergedprs.json"
    path.write_text(json.dumps({"auth": "env", "default_organization": "acme"}), encoding="utf-8")

    config = load_config(path)

    assert config.auth == "env"
    assert config.default_organization == "acme"


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="failed reading config file"):
        load_config(tmp_path / "missing.json")


def test_load_config_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "mergedprs.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigError, match="invalid JSON"):
        load_config(path)


def test_load_config_invalid_values(tmp_path: Path) -> None:
    path = tmp_path / "mergedprs.json"
    path.write_text(json.dumps({"auth": "token"}), encoding="utf-8")

    with pytest.raises(ConfigError, match="invalid config"):
        load_config(path)
