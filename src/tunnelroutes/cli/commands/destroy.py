"""Destroy command."""

from __future__ import annotations

import argparse

from rich.console import Console

from tunnelroutes.cli.common import format_counts
from tunnelroutes.config import load_config
from tunnelroutes.contracts.reconcile import ApplyResult
from tunnelroutes.sdk import TunnelRoutes


async def run_destroy(args: argparse.Namespace, console: Console) -> ApplyResult:
    config = load_config(args.config)
    sdk = await TunnelRoutes.from_config(config)
    result = await sdk.destroy(args.names or None)
    console.print(f"tunnelroutes - destroy complete: {format_counts(result)}", markup=False)
    return result


__all__ = ["run_destroy"]
