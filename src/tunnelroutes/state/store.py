"""State file persistence helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from tunnelroutes.contracts.exceptions import StateError
from tunnelroutes.contracts.state import StateFile


def load_state(path: Path) -> StateFile:
    if not path.exists():
        return StateFile()
    try:
        payload: Any = json.loads(path.read_text(encoding="utf-8"))
        return StateFile.model_validate(payload)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        raise StateError(f"invalid state file: {path}") from exc


def persist_state(state: StateFile, path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(state.model_dump_json(indent=2), encoding="utf-8")
    except OSError as exc:
        raise StateError(f"failed to persist state file: {path}") from exc
