"""Tests for CloudflareRouteClient against a mocked HTTP transport."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from tunnelroutes.clients.cloudflare import CloudflareRouteClient
from tunnelroutes.contracts.exceptions import AuthenticationError, ProviderError
from tunnelroutes.contracts.route import (
    TunnelRouteCreateParams,
    TunnelRouteDeleteParams,
    TunnelRouteListParams,
    TunnelRouteUpdateParams,
)

API = "https://api.cloudflare.com/client/v4"


def _envelope(result: object, **extra: object) -> dict[str, object]:
    return {"success": True, "errors": [], "messages": [], "result": result, **extra}


def _route(network: str = "192.168.0.0/26", **fields: object) -> dict[str, object]:
    return {
        "network": network,
        "tunnel_id": "tunnel-a",
        "tunnel_name": "office",
        "comment": None,
        "virtual_network_id": "vnet-default",
        "created_at": "2024-01-02T03:04:05Z",
        "deleted_at": None,
        **fields,
    }


def _client(handler: Callable[[httpx.Request], httpx.Response]) -> CloudflareRouteClient:
    http_client = httpx.AsyncClient(base_url=API, transport=httpx.MockTransport(handler))
    return CloudflareRouteClient(token="token-123", http_client=http_client)


@pytest.mark.asyncio
async def test_list_routes_sends_filters_and_parses_routes() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=_envelope([_route()], result_info={"page": 1, "total_pages": 1}))

    async with _client(handler) as client:
        routes = await client.list_routes(
            TunnelRouteListParams(
                account_id="acct1",
                network_subset="192.168.0.0/26",
                network_superset="192.168.0.0/26",
            )
        )

    request = seen[0]
    assert request.method == "GET"
    assert request.url.path == "/client/v4/accounts/acct1/teamnet/routes"
    assert request.url.params["is_deleted"] == "false"
    assert request.url.params["network_subset"] == "192.168.0.0/26"
    assert request.url.params["network_superset"] == "192.168.0.0/26"
    assert "virtual_network_id" not in request.url.params
    assert len(routes) == 1
    assert routes[0].tunnel_id == "tunnel-a"
    assert routes[0].comment == ""
    assert routes[0].virtual_network_id == "vnet-default"


@pytest.mark.asyncio
async def test_list_routes_follows_pagination() -> None:
    pages = {
        "1": _envelope([_route("10.0.0.0/24")], result_info={"page": 1, "total_pages": 2}),
        "2": _envelope([_route("10.0.1.0/24")], result_info={"page": 2, "total_pages": 2}),
    }

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=pages[request.url.params["page"]])

    async with _client(handler) as client:
        routes = await client.list_routes(TunnelRouteListParams(account_id="acct1"))

    assert [route.network for route in routes] == ["10.0.0.0/24", "10.0.1.0/24"]


@pytest.mark.asyncio
async def test_create_route_escapes_network_in_path() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=_envelope(_route(virtual_network_id="vnet1", comment="lan")))

    async with _client(handler) as client:
        route = await client.create_route(
            TunnelRouteCreateParams(
                account_id="acct1",
                tunnel_id="tunnel-a",
                network="192.168.0.0/26",
                virtual_network_id="vnet1",
                comment="lan",
            )
        )

    request = seen[0]
    assert request.method == "POST"
    assert request.url.raw_path == b"/client/v4/accounts/acct1/teamnet/routes/network/192.168.0.0%2F26"
    assert json.loads(request.content) == {"tunnel_id": "tunnel-a", "comment": "lan", "virtual_network_id": "vnet1"}
    assert route.comment == "lan"


@pytest.mark.asyncio
async def test_update_route_patches_full_field_set() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=_envelope(_route()))

    async with _client(handler) as client:
        await client.update_route(
            TunnelRouteUpdateParams(account_id="acct1", tunnel_id="tunnel-b", network="192.168.0.0/26")
        )

    request = seen[0]
    assert request.method == "PATCH"
    assert json.loads(request.content) == {"network": "192.168.0.0/26", "tunnel_id": "tunnel-b", "comment": ""}


@pytest.mark.asyncio
async def test_delete_route_passes_virtual_network_as_query() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=_envelope(_route()))

    async with _client(handler) as client:
        await client.delete_route(
            TunnelRouteDeleteParams(account_id="acct1", network="192.168.0.0/26", virtual_network_id="vnet1")
        )

    request = seen[0]
    assert request.method == "DELETE"
    assert request.url.params["virtual_network_id"] == "vnet1"


@pytest.mark.asyncio
async def test_api_errors_raise_provider_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        body = {"success": False, "errors": [{"code": 1014, "message": "route already exists"}], "result": None}
        return httpx.Response(409, json=body)

    async with _client(handler) as client:
        with pytest.raises(ProviderError, match="1014: route already exists"):
            await client.create_route(
                TunnelRouteCreateParams(account_id="acct1", tunnel_id="t", network="10.0.0.0/24")
            )


@pytest.mark.asyncio
async def test_unsuccessful_envelope_with_200_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"success": False, "errors": [{"code": 7003, "message": "bad"}]})

    async with _client(handler) as client:
        with pytest.raises(ProviderError, match="7003: bad"):
            await client.list_routes(TunnelRouteListParams(account_id="acct1"))


@pytest.mark.asyncio
async def test_forbidden_raises_authentication_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, json={"success": False, "errors": [{"code": 10000, "message": "Authentication error"}]})

    async with _client(handler) as client:
        with pytest.raises(AuthenticationError):
            await client.list_routes(TunnelRouteListParams(account_id="acct1"))


@pytest.mark.asyncio
async def test_transport_error_raises_provider_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with _client(handler) as client:
        with pytest.raises(ProviderError, match="connection refused"):
            await client.list_routes(TunnelRouteListParams(account_id="acct1"))


@pytest.mark.asyncio
async def test_requires_context_manager() -> None:
    client = CloudflareRouteClient(token="token-123")

    with pytest.raises(ProviderError, match="not initialized"):
        await client.list_routes(TunnelRouteListParams(account_id="acct1"))


@pytest.mark.asyncio
async def test_owned_http_client_sends_bearer_token() -> None:
    client = CloudflareRouteClient(token="token-123", api_url="https://example.test/client/v4/")

    async with client:
        assert client._client is not None
        assert client._client.headers["Authorization"] == "Bearer token-123"
        assert str(client._client.base_url) == "https://example.test/client/v4/"

    assert client._client is None
