"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("tunnelroutes")
    except PackageNotFoundError:
        return "0.0.0"


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", default="./tunnelroutes.json", help="Path to tunnelroutes.json")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tunnelroutes")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    apply_parser = subparsers.add_parser("apply", help="Reconcile declared routes with the API")
    _add_common(apply_parser)
    apply_parser.add_argument("--dry-run", action="store_true", help="Show planned changes without applying them")

    refresh_parser = subparsers.add_parser("refresh", help="Re-read stored routes from the API")
    _add_common(refresh_parser)

    import_parser = subparsers.add_parser("import", help="Adopt an existing route into the state file")
    _add_common(import_parser)
    import_parser.add_argument("name", help="Route name to store the imported route under")
    import_parser.add_argument(
        "id",
        help="Route id: accountID/network or accountID/network/virtual_network_id",
    )

    destroy_parser = subparsers.add_parser("destroy", help="Delete stored routes from the API")
    _add_common(destroy_parser)
    destroy_parser.add_argument("names", nargs="*", help="Route names to delete (default: all)")

    return parser


__all__ = ["build_parser"]
