"""Remote route client contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from tunnelroutes.contracts.route import (
    TunnelRoute,
    TunnelRouteCreateParams,
    TunnelRouteDeleteParams,
    TunnelRouteListParams,
    TunnelRouteUpdateParams,
)


class RouteClient(ABC):
    """Async client for the tunnel route endpoints of a remote API.

    Every method raises :class:`~tunnelroutes.contracts.exceptions.ProviderError`
    on transport or service-reported failure.
    """

    @abstractmethod
    async def __aenter__(self) -> RouteClient: ...

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...

    @abstractmethod
    async def list_routes(self, params: TunnelRouteListParams) -> list[TunnelRoute]: ...

    @abstractmethod
    async def create_route(self, params: TunnelRouteCreateParams) -> TunnelRoute: ...

    @abstractmethod
    async def update_route(self, params: TunnelRouteUpdateParams) -> TunnelRoute: ...

    @abstractmethod
    async def delete_route(self, params: TunnelRouteDeleteParams) -> None: ...
