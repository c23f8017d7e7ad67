"""Import command."""

from __future__ import annotations

import argparse

from rich.console import Console

from tunnelroutes.config import load_config
from tunnelroutes.contracts.state import RouteState
from tunnelroutes.sdk import TunnelRoutes


async def run_import(args: argparse.Namespace, console: Console) -> RouteState:
    config = load_config(args.config)
    sdk = await TunnelRoutes.from_config(config)
    observed = await sdk.import_route(args.name, args.id)
    console.print(f"Imported {args.name}: {observed.id} (tunnel {observed.tunnel_id})", markup=False)
    return observed


__all__ = ["run_import"]
