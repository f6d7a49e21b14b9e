"""Agent tool registry."""

from __future__ import annotations

from typing import Any

from mergedprs.config import MergedPrsConfig
from mergedprs.tools.base import Tool
from mergedprs.tools.fetch_pr import FetchPrInput, create_fetch_pr_tool
from mergedprs.tools.github_auth import GithubAuthInput, create_github_auth_tool


def create_tools(config: MergedPrsConfig | None = None) -> dict[str, Tool[Any, Any]]:
    tools: list[Tool[Any, Any]] = [
        create_github_auth_tool(config=config),
        create_fetch_pr_tool(config=config),
    ]
    return {tool.id: tool for tool in tools}


TOOLS = create_tools()


def get_tool(tool_id: str) -> Tool[Any, Any]:
    """Return the registered tool with *tool_id*.

    Raises:
        KeyError: If no tool has that id.
    """
    try:
        return TOOLS[tool_id]
    except KeyError:
        raise KeyError(f"Unknown tool: {tool_id}") from None


__all__ = [
    "TOOLS",
    "FetchPrInput",
    "GithubAuthInput",
    "Tool",
    "create_fetch_pr_tool",
    "create_github_auth_tool",
    "create_tools",
    "get_tool",
]
