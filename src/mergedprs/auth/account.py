"""Account metadata from ``gh auth status``.

Newer ``gh`` releases can print status as JSON (``--json hosts``); older ones
only print human-readable text, on stderr for most versions. The reader tries
JSON first and falls back to parsing the text.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any

from mergedprs.auth.base import AccountInfoReader
from mergedprs.auth.gh import run_gh
from mergedprs.config import DEFAULT_HOSTNAME
from mergedprs.models import AccountInfo

_LOG = logging.getLogger(__name__)

_ACCOUNT_RE = re.compile(r"account ([\w-]+)")
_SCOPES_RE = re.compile(r"Token scopes: ('.*')")


def _split_scopes(raw: str) -> list[str]:
    scopes: list[str] = []
    for part in raw.split(","):
        scope = part.strip().strip("'\"").strip()
        if scope:
            scopes.append(scope)
    return scopes


def parse_auth_status(text: str) -> AccountInfo:
    """Extract username and scopes from ``gh auth status`` text.

    The username follows the literal ``account ``; scopes are the quoted,
    comma-separated list after ``Token scopes: ``. Missing pieces stay empty.
    """
    username = ""
    scopes: list[str] = []

    account_match = _ACCOUNT_RE.search(text)
    if account_match:
        username = account_match.group(1)

    scopes_match = _SCOPES_RE.search(text)
    if scopes_match:
        scopes = _split_scopes(scopes_match.group(1))

    return AccountInfo(username=username, scopes=scopes)


def parse_auth_status_json(payload: Any, *, hostname: str = DEFAULT_HOSTNAME) -> AccountInfo:
    """Extract username and scopes from ``gh auth status --json hosts`` output.

    Raises:
        ValueError: If the payload has no account entry for *hostname*.
    """
    if not isinstance(payload, dict):
        raise ValueError("gh auth status JSON is not an object")
    hosts = payload.get("hosts")
    if not isinstance(hosts, dict):
        raise ValueError("gh auth status JSON has no hosts")
    entries = hosts.get(hostname)
    if not isinstance(entries, list) or not entries:
        raise ValueError(f"gh auth status JSON has no accounts for host {hostname}")

    accounts = [entry for entry in entries if isinstance(entry, dict)]
    active = next((entry for entry in accounts if entry.get("active")), accounts[0] if accounts else None)
    if active is None:
        raise ValueError(f"gh auth status JSON has no accounts for host {hostname}")

    raw_scopes = active.get("scopes") or ""
    if isinstance(raw_scopes, list):
        scopes = [str(scope).strip() for scope in raw_scopes if str(scope).strip()]
    else:
        scopes = _split_scopes(str(raw_scopes))

    return AccountInfo(username=str(active.get("login") or ""), scopes=scopes)


@dataclass(frozen=True)
class GhCliAccountReader(AccountInfoReader):
    hostname: str = DEFAULT_HOSTNAME

    async def read(self) -> AccountInfo:
        try:
            return await self._read_json()
        except (OSError, ValueError) as exc:
            _LOG.debug("gh auth status --json unavailable, falling back to text: %s", exc)

        output = await run_gh("auth", "status", "--hostname", self.hostname)
        if not output.ok:
            raise OSError(f"gh auth status failed for host {self.hostname}: {output.stderr.strip()}")
        return parse_auth_status(f"{output.stdout}\n{output.stderr}")

    async def _read_json(self) -> AccountInfo:
        output = await run_gh("auth", "status", "--json", "hosts", "--hostname", self.hostname)
        if not output.ok:
            raise ValueError(output.stderr.strip() or f"gh auth status exited with {output.returncode}")
        return parse_auth_status_json(json.loads(output.stdout), hostname=self.hostname)
