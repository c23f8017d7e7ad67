"""Token resolver factory."""

from __future__ import annotations

from tunnelroutes.auth.base import TokenResolver
from tunnelroutes.auth.resolvers.env import EnvTokenResolver
from tunnelroutes.auth.resolvers.static import StaticTokenResolver
from tunnelroutes.contracts.config import TunnelRoutesConfig
from tunnelroutes.contracts.exceptions import ConfigError

RESOLVERS: dict[str, type[TokenResolver]] = {
    "env": EnvTokenResolver,
    "token": StaticTokenResolver,
}


def create_token_resolver(config: TunnelRoutesConfig) -> TokenResolver:
    auth_mode = config.auth
    if auth_mode not in RESOLVERS:
        raise ConfigError(f"Unknown auth mode: {auth_mode}")

    if auth_mode == "env":
        return EnvTokenResolver()
    return StaticTokenResolver(token=config.token or "")
