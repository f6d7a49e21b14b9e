"""Tools command."""

from __future__ import annotations

import argparse
import json

from mergedprs.config import MergedPrsConfig
from mergedprs.tools import create_tools


def run_tools(args: argparse.Namespace, config: MergedPrsConfig) -> list[str]:
    tools = create_tools(config)
    if args.json:
        print(json.dumps([tool.describe() for tool in tools.values()], indent=2))
    else:
        for tool in tools.values():
            print(f"{tool.id:<12} {tool.description}")
    return list(tools)
