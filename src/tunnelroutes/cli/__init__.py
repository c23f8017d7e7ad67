"""Command-line interface for tunnelroutes."""

from __future__ import annotations

from tunnelroutes.cli.app import main as main
from tunnelroutes.cli.parser import build_parser as build_parser

__all__ = ["build_parser", "main"]
