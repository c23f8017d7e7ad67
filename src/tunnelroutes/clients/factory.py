"""Route client factory."""

from __future__ import annotations

from tunnelroutes.clients.cloudflare import CloudflareRouteClient
from tunnelroutes.clients.memory import InMemoryRouteClient
from tunnelroutes.contracts.client import RouteClient
from tunnelroutes.contracts.config import TunnelRoutesConfig

MEMORY_API_URL = "memory://"


def create_client(config: TunnelRoutesConfig, *, token: str) -> RouteClient:
    if config.api_url == MEMORY_API_URL:
        return InMemoryRouteClient()
    return CloudflareRouteClient(
        token=token,
        api_url=config.api_url,
        timeout_seconds=config.timeout_seconds,
        max_retries=config.max_retries,
    )
