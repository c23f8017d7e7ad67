"""Route client implementations and factory."""

from tunnelroutes.clients.cloudflare import CloudflareRouteClient
from tunnelroutes.clients.factory import create_client
from tunnelroutes.clients.memory import InMemoryRouteClient

__all__ = ["CloudflareRouteClient", "InMemoryRouteClient", "create_client"]
