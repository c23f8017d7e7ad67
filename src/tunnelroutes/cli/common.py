"""Shared CLI rendering helpers."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tunnelroutes.contracts.reconcile import ApplyResult, ReconcileAction

_ACTION_STYLES = {
    ReconcileAction.NOOP: "dim",
    ReconcileAction.CREATE: "green",
    ReconcileAction.UPDATE: "yellow",
    ReconcileAction.REPLACE: "magenta",
    ReconcileAction.DELETE: "red",
}


def results_table(result: ApplyResult) -> Table:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Route")
    table.add_column("Action")
    table.add_column("Network")
    table.add_column("Id")
    table.add_column("Changed")
    for entry in result.results:
        action = entry.change.action
        table.add_row(
            escape(entry.name),
            f"[{_ACTION_STYLES[action]}]{action.value}[/]",
            entry.state.network,
            escape(entry.state.id) or "-",
            ", ".join(entry.change.changed_fields) or "-",
        )
    return table


def format_counts(result: ApplyResult) -> str:
    parts = [
        f"{result.count(action)} {action.value}"
        for action in ReconcileAction
        if action is not ReconcileAction.NOOP and result.count(action)
    ]
    return ", ".join(parts) if parts else "no changes"


def make_console() -> Console:
    return Console(highlight=False)
