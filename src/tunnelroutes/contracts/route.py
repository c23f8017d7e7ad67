"""Remote tunnel route contracts."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class TunnelRoute(BaseModel):
    """A tunnel route as reported by the remote API."""

    model_config = ConfigDict(extra="ignore")

    network: str
    tunnel_id: str
    tunnel_name: str = ""
    comment: str = ""
    virtual_network_id: str = ""
    created_at: datetime | None = None
    deleted_at: datetime | None = None

    @field_validator("tunnel_name", "comment", "virtual_network_id", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        # The API omits or nulls empty optional fields.
        return "" if value is None else value


class TunnelRouteListParams(BaseModel):
    account_id: str
    is_deleted: bool = False
    network_subset: str = ""
    network_superset: str = ""
    virtual_network_id: str = ""
    tunnel_id: str = ""
    comment: str = ""


class TunnelRouteCreateParams(BaseModel):
    account_id: str
    tunnel_id: str
    network: str
    virtual_network_id: str = ""
    comment: str = ""


class TunnelRouteUpdateParams(BaseModel):
    account_id: str
    tunnel_id: str
    network: str
    virtual_network_id: str = ""
    comment: str = ""


class TunnelRouteDeleteParams(BaseModel):
    account_id: str
    network: str
    virtual_network_id: str = ""
