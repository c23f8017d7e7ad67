"""In-memory route client used for dry runs and tests."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from datetime import datetime, timezone
from types import TracebackType

from tunnelroutes.contracts.client import RouteClient
from tunnelroutes.contracts.exceptions import ProviderError
from tunnelroutes.contracts.route import (
    TunnelRoute,
    TunnelRouteCreateParams,
    TunnelRouteDeleteParams,
    TunnelRouteListParams,
    TunnelRouteUpdateParams,
)


@dataclass(frozen=True)
class RouteKey:
    """Natural key of a route within the store."""

    account_id: str
    network: str
    virtual_network_id: str


class InMemoryRouteClient(RouteClient):
    """Deterministic :class:`RouteClient` that keeps routes in a dict.

    Routes created without a virtual network land in *default_virtual_network_id*,
    mirroring the API which always reports one. Networks are stored in canonical
    form, as the API returns them.
    """

    def __init__(self, *, default_virtual_network_id: str = "default-vnet") -> None:
        self.default_virtual_network_id = default_virtual_network_id
        self.routes: dict[RouteKey, tuple[str, TunnelRoute]] = {}

    async def __aenter__(self) -> InMemoryRouteClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        return None

    def seed(self, account_id: str, route: TunnelRoute) -> None:
        vnet = route.virtual_network_id or self.default_virtual_network_id
        network = _canonical(route.network)
        stored = route.model_copy(update={"network": network, "virtual_network_id": vnet})
        self.routes[RouteKey(account_id, network, vnet)] = (account_id, stored)

    async def list_routes(self, params: TunnelRouteListParams) -> list[TunnelRoute]:
        matched: list[TunnelRoute] = []
        for (account_id, route) in self.routes.values():
            if account_id != params.account_id:
                continue
            if (route.deleted_at is not None) != params.is_deleted:
                continue
            if params.virtual_network_id and route.virtual_network_id != params.virtual_network_id:
                continue
            if params.tunnel_id and route.tunnel_id != params.tunnel_id:
                continue
            if params.comment and params.comment not in route.comment:
                continue
            if not _network_matches(route.network, params.network_subset, params.network_superset):
                continue
            matched.append(route)
        return matched

    async def create_route(self, params: TunnelRouteCreateParams) -> TunnelRoute:
        key = self._key(params.account_id, params.network, params.virtual_network_id)
        if key in self.routes:
            raise ProviderError(f"route for network {params.network} already exists")
        route = TunnelRoute(
            network=key.network,
            tunnel_id=params.tunnel_id,
            comment=params.comment,
            virtual_network_id=key.virtual_network_id,
            created_at=datetime.now(timezone.utc),
        )
        self.routes[key] = (params.account_id, route)
        return route

    async def update_route(self, params: TunnelRouteUpdateParams) -> TunnelRoute:
        key = self._key(params.account_id, params.network, params.virtual_network_id)
        if key not in self.routes:
            raise ProviderError(f"route for network {params.network} not found")
        _, existing = self.routes[key]
        route = existing.model_copy(update={"tunnel_id": params.tunnel_id, "comment": params.comment})
        self.routes[key] = (params.account_id, route)
        return route

    async def delete_route(self, params: TunnelRouteDeleteParams) -> None:
        key = self._key(params.account_id, params.network, params.virtual_network_id)
        if self.routes.pop(key, None) is None:
            raise ProviderError(f"route for network {params.network} not found")

    def _key(self, account_id: str, network: str, virtual_network_id: str) -> RouteKey:
        return RouteKey(account_id, _canonical(network), virtual_network_id or self.default_virtual_network_id)


def _canonical(network: str) -> str:
    return str(ipaddress.ip_network(network, strict=False))


def _network_matches(network: str, subset: str, superset: str) -> bool:
    route_net = ipaddress.ip_network(network, strict=False)
    if subset:
        bound = ipaddress.ip_network(subset, strict=False)
        if route_net.version != bound.version or not route_net.subnet_of(bound):  # type: ignore[arg-type]
            return False
    if superset:
        bound = ipaddress.ip_network(superset, strict=False)
        if route_net.version != bound.version or not route_net.supernet_of(bound):  # type: ignore[arg-type]
            return False
    return True
