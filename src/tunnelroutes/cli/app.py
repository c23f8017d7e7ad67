"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Awaitable, Callable
from typing import Any

from rich.console import Console

from tunnelroutes.cli.commands.apply import run_apply
from tunnelroutes.cli.commands.destroy import run_destroy
from tunnelroutes.cli.commands.import_route import run_import
from tunnelroutes.cli.commands.refresh import run_refresh
from tunnelroutes.cli.common import make_console
from tunnelroutes.cli.parser import build_parser
from tunnelroutes.contracts.exceptions import (
    ConfigError,
    ImportReadError,
    InvalidImportIdError,
    ProviderError,
    StateError,
)

COMMANDS: dict[str, Callable[[argparse.Namespace, Console], Awaitable[Any]]] = {
    "apply": run_apply,
    "refresh": run_refresh,
    "import": run_import,
    "destroy": run_destroy,
}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        asyncio.run(COMMANDS[args.command](args, make_console()))
        return 0
    except (ConfigError, StateError, InvalidImportIdError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except (ProviderError, ImportReadError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
