"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from tunnelroutes.contracts.state import DesiredRoute

DEFAULT_API_URL = "https://api.cloudflare.com/client/v4"


class TunnelRoutesConfig(BaseModel):
    auth: str = "env"
    token: str | None = None
    api_url: str = DEFAULT_API_URL
    state_path: Path = Path("tunnelroutes.state.json")
    timeout_seconds: float = Field(default=30.0, gt=0)
    max_retries: int = Field(default=3, ge=0, le=10)
    routes: dict[str, DesiredRoute] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_auth_token(self) -> TunnelRoutesConfig:
        token = (self.token or "").strip()
        if self.auth == "token":
            if not token:
                raise ValueError("token auth requires a non-empty token")
            return self
        if token:
            raise ValueError("token must be unset when auth is not 'token'")
        if self.auth not in {"env", "token"}:
            raise ValueError("auth must be one of: env, token")
        return self

    @model_validator(mode="after")
    def validate_unique_natural_keys(self) -> TunnelRoutesConfig:
        seen: dict[tuple[str, str, str], str] = {}
        for name, route in self.routes.items():
            key = (route.account_id, route.network, route.virtual_network_id)
            if key in seen:
                raise ValueError(
                    f"routes {seen[key]!r} and {name!r} declare the same network "
                    f"{route.network} in the same account and virtual network"
                )
            seen[key] = name
        return self
