"""Desired-state and state-record contracts."""

from __future__ import annotations

import ipaddress
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

_ROUTE_FIELDS = ("account_id", "tunnel_id", "network", "virtual_network_id", "comment")


class DesiredRoute(BaseModel):
    """Declared configuration of a single tunnel route.

    Validated once when the config is loaded so the reconciler never has to
    second-guess field types.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    account_id: str
    tunnel_id: str
    network: str
    virtual_network_id: str = ""
    comment: str = ""

    @field_validator("account_id", "tunnel_id", "network")
    @classmethod
    def _require_non_empty(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must be a non-empty string")
        return value

    @field_validator("network")
    @classmethod
    def _require_cidr(cls, value: str) -> str:
        if "/" not in value:
            raise ValueError(f"network {value!r} must be in CIDR notation")
        try:
            parsed = ipaddress.ip_network(value, strict=False)
        except ValueError as exc:
            raise ValueError(f"network {value!r} is not a valid CIDR: {exc}") from exc
        # The API reports networks in canonical form.
        return str(parsed)

    @field_validator("virtual_network_id", "comment", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    def to_state(self, *, id: str = "") -> RouteState:
        return RouteState(id=id, **self.model_dump())


class RouteState(BaseModel):
    """State Store record: the identifier plus the last observed fields.

    An empty ``id`` means the route is not known to exist remotely.
    """

    id: str = ""
    account_id: str = ""
    tunnel_id: str = ""
    network: str = ""
    virtual_network_id: str = ""
    comment: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_to_str(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, Any], *, id: Any = "") -> RouteState:
        """Build a record from an untyped mapping.

        Absent or wrong-typed values fall back to ``""``.
        """
        return cls(id=id, **{name: attributes.get(name) for name in _ROUTE_FIELDS})

    @property
    def exists(self) -> bool:
        return bool(self.id)

    def attributes(self) -> dict[str, str]:
        return {name: getattr(self, name) for name in _ROUTE_FIELDS}


class StateFile(BaseModel):
    """On-disk State Store: one record per declared route name."""

    version: int = 1
    resources: dict[str, RouteState] = Field(default_factory=dict)
