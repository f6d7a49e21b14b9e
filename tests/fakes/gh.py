"""Fake ``gh`` CLI processes and account readers."""

from __future__ import annotations

from typing import Any

from mergedprs.auth.base import AccountInfoReader
from mergedprs.models import AccountInfo


class FakeProcess:
    def __init__(self, returncode: int, stdout: bytes = b"", stderr: bytes = b"") -> None:
        self.returncode = returncode
        self._stdout = stdout
        self._stderr = stderr

    async def communicate(self) -> tuple[bytes, bytes]:
        return self._stdout, self._stderr


class FakeGh:
    """Stands in for ``asyncio.create_subprocess_exec`` running ``gh``.

    Unregistered argument lists exit with status 1.
    """

    def __init__(self) -> None:
        self.responses: dict[tuple[str, ...], FakeProcess] = {}
        self.calls: list[tuple[str, ...]] = []
        self.installed = True

    def on(self, *args: str, returncode: int = 0, stdout: str = "", stderr: str = "") -> None:
        self.responses[("gh", *args)] = FakeProcess(returncode, stdout.encode(), stderr.encode())

    async def __call__(self, *args: str, **kwargs: Any) -> FakeProcess:
        self.calls.append(args)
        if not self.installed:
            raise FileNotFoundError(2, "No such file or directory", "gh")
        return self.responses.get(args, FakeProcess(returncode=1, stderr=b"unknown command"))


class FakeAccountReader(AccountInfoReader):
    def __init__(self, info: AccountInfo | None = None, error: Exception | None = None) -> None:
        self.info = info or AccountInfo()
        self.error = error
        self.calls = 0

    async def read(self) -> AccountInfo:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.info
