"""Refresh command."""

from __future__ import annotations

import argparse

from rich.console import Console

from tunnelroutes.config import load_config
from tunnelroutes.contracts.reconcile import RefreshResult
from tunnelroutes.sdk import TunnelRoutes


def format_refresh_summary(result: RefreshResult) -> str:
    lines = [
        "tunnelroutes - refresh complete",
        f"  Refreshed: {len(result.refreshed)}",
        f"  Vanished:  {', '.join(result.vanished) if result.vanished else 'none'}",
    ]
    return "\n".join(lines)


async def run_refresh(args: argparse.Namespace, console: Console) -> RefreshResult:
    config = load_config(args.config)
    sdk = await TunnelRoutes.from_config(config)
    result = await sdk.refresh()
    console.print(format_refresh_summary(result), markup=False)
    return result


__all__ = ["format_refresh_summary", "run_refresh"]
