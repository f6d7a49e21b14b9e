"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from mergedprs.cli.commands.auth import run_auth
from mergedprs.cli.commands.fetch import run_fetch
from mergedprs.cli.commands.tools import run_tools
from mergedprs.cli.parser import build_parser
from mergedprs.config import MergedPrsConfig, load_config
from mergedprs.exceptions import ConfigError, CredentialError, FetchError, MergedPrsError


def _load_config(args: argparse.Namespace) -> MergedPrsConfig:
    if args.config is None:
        return MergedPrsConfig()
    return load_config(args.config)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        config = _load_config(args)
        if args.command == "auth":
            asyncio.run(run_auth(args, config))
        elif args.command == "fetch":
            asyncio.run(run_fetch(args, config))
        elif args.command == "tools":
            run_tools(args, config)
        return 0
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except (CredentialError, FetchError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except (MergedPrsError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
