"""Command-line interface for mergedprs."""

from __future__ import annotations

from mergedprs.cli.app import main as main
from mergedprs.cli.parser import build_parser as build_parser

__all__ = ["build_parser", "main"]
