"""Cloudflare API client."""

from tunnelroutes.clients.cloudflare.client import CloudflareRouteClient

__all__ = ["CloudflareRouteClient"]
