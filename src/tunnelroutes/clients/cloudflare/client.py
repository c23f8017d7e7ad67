"""Cloudflare teamnet routes client."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from tunnelroutes.clients.cloudflare._retrying_transport import RetryingTransport
from tunnelroutes.clients.cloudflare.mapper import (
    format_api_errors,
    list_query,
    network_path,
    parse_route,
    parse_routes,
    routes_path,
    total_pages,
)
from tunnelroutes.contracts.client import RouteClient
from tunnelroutes.contracts.config import DEFAULT_API_URL
from tunnelroutes.contracts.exceptions import AuthenticationError, ProviderError
from tunnelroutes.contracts.route import (
    TunnelRoute,
    TunnelRouteCreateParams,
    TunnelRouteDeleteParams,
    TunnelRouteListParams,
    TunnelRouteUpdateParams,
)

logger = logging.getLogger(__name__)

_PER_PAGE = 50


class CloudflareRouteClient(RouteClient):
    """:class:`RouteClient` backed by the Cloudflare v4 REST API.

    Use as an async context manager; the underlying ``httpx.AsyncClient`` is
    opened on enter and closed on exit unless one was injected.
    """

    def __init__(
        self,
        *,
        token: str,
        api_url: str = DEFAULT_API_URL,
        timeout_seconds: float = 30.0,
        max_retries: int = 3,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._token = token
        self._api_url = api_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._max_retries = max_retries
        self._client = http_client
        self._owns_client = http_client is None

    async def __aenter__(self) -> CloudflareRouteClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._api_url,
                headers={
                    "Authorization": f"Bearer {self._token}",
                    "Accept": "application/json",
                    "User-Agent": "tunnelroutes",
                },
                transport=RetryingTransport(max_retries=self._max_retries),
                timeout=httpx.Timeout(self._timeout_seconds),
            )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def list_routes(self, params: TunnelRouteListParams) -> list[TunnelRoute]:
        routes: list[TunnelRoute] = []
        page = 1
        while True:
            payload = await self._request(
                "GET",
                routes_path(params.account_id),
                params=list_query(params, page=page, per_page=_PER_PAGE),
            )
            routes.extend(parse_routes(payload.get("result")))
            if page >= total_pages(payload):
                return routes
            page += 1

    async def create_route(self, params: TunnelRouteCreateParams) -> TunnelRoute:
        body = {
            "tunnel_id": params.tunnel_id,
            "comment": params.comment,
        }
        if params.virtual_network_id:
            body["virtual_network_id"] = params.virtual_network_id
        payload = await self._request("POST", network_path(params.account_id, params.network), json=body)
        return parse_route(payload.get("result"))

    async def update_route(self, params: TunnelRouteUpdateParams) -> TunnelRoute:
        body = {
            "network": params.network,
            "tunnel_id": params.tunnel_id,
            "comment": params.comment,
        }
        if params.virtual_network_id:
            body["virtual_network_id"] = params.virtual_network_id
        payload = await self._request("PATCH", network_path(params.account_id, params.network), json=body)
        return parse_route(payload.get("result"))

    async def delete_route(self, params: TunnelRouteDeleteParams) -> None:
        query = {"virtual_network_id": params.virtual_network_id} if params.virtual_network_id else None
        await self._request("DELETE", network_path(params.account_id, params.network), params=query)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        if self._client is None:
            raise ProviderError("Client is not initialized. Use 'async with'.")

        logger.debug("%s %s params=%s", method, path, params)
        try:
            response = await self._client.request(method, path, params=params, json=json)
        except httpx.HTTPError as exc:
            raise ProviderError(f"{method} {path} failed: {exc}") from exc

        try:
            payload: Any = response.json()
        except ValueError:
            payload = None

        if response.status_code in {401, 403}:
            raise AuthenticationError(
                f"Cloudflare API rejected credentials (HTTP {response.status_code}): {format_api_errors(payload)}"
            )
        if response.is_error or not isinstance(payload, dict) or payload.get("success") is False:
            raise ProviderError(
                f"{method} {path} returned HTTP {response.status_code}: {format_api_errors(payload)}"
            )
        return payload
