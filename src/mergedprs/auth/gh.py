"""Subprocess seam for the ``gh`` CLI."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class GhOutput:
    """Exit status and decoded output of one ``gh`` invocation."""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


async def run_gh(*args: str) -> GhOutput:
    """Run ``gh <args>`` without a shell and capture both streams.

    A non-zero exit is returned, not raised; callers decide what it means.

    Raises:
        OSError: If the ``gh`` executable cannot be started.
    """
    _LOG.debug("Running: gh %s", " ".join(args))
    process = await asyncio.create_subprocess_exec(
        "gh",
        *args,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    stdout, stderr = await process.communicate()
    return GhOutput(
        returncode=process.returncode or 0,
        stdout=stdout.decode(errors="replace") if stdout else "",
        stderr=stderr.decode(errors="replace") if stderr else "",
    )
