"""Reconciliation result contracts."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from tunnelroutes.contracts.state import RouteState


class ReconcileAction(str, Enum):
    NOOP = "noop"
    CREATE = "create"
    UPDATE = "update"
    REPLACE = "replace"
    DELETE = "delete"


class PlannedChange(BaseModel):
    action: ReconcileAction
    changed_fields: list[str] = Field(default_factory=list)


class ReconcileResult(BaseModel):
    name: str = ""
    change: PlannedChange
    state: RouteState
    dry_run: bool = False


class ApplyResult(BaseModel):
    results: list[ReconcileResult] = Field(default_factory=list)
    dry_run: bool = False

    def count(self, action: ReconcileAction) -> int:
        return sum(1 for result in self.results if result.change.action is action)


class RefreshResult(BaseModel):
    refreshed: list[str] = Field(default_factory=list)
    vanished: list[str] = Field(default_factory=list)
