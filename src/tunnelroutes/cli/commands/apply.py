"""Apply command."""

from __future__ import annotations

import argparse

from rich.console import Console

from tunnelroutes.cli.common import format_counts, results_table
from tunnelroutes.config import load_config
from tunnelroutes.contracts.reconcile import ApplyResult
from tunnelroutes.sdk import TunnelRoutes


def render_apply_summary(result: ApplyResult, console: Console) -> None:
    mode = "dry-run" if result.dry_run else "apply"
    console.print(f"tunnelroutes - {mode} complete: {format_counts(result)}", markup=False)
    if result.results:
        console.print(results_table(result))
    if result.dry_run:
        console.print("[dry-run] No routes were changed", markup=False)


async def run_apply(args: argparse.Namespace, console: Console) -> ApplyResult:
    config = load_config(args.config)
    sdk = await TunnelRoutes.from_config(config)
    result = await sdk.apply(dry_run=args.dry_run)
    render_apply_summary(result, console)
    return result


__all__ = ["render_apply_summary", "run_apply"]
