"""Shared test fixtures for tunnelroutes tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.fakes.client import SpyRouteClient
from tunnelroutes.contracts.config import TunnelRoutesConfig
from tunnelroutes.contracts.state import DesiredRoute
from tunnelroutes.reconciler import TunnelRouteReconciler


@pytest.fixture
def client() -> SpyRouteClient:
    return SpyRouteClient()


@pytest.fixture
def reconciler(client: SpyRouteClient) -> TunnelRouteReconciler:
    return TunnelRouteReconciler(client)


@pytest.fixture
def office_route() -> DesiredRoute:
    """A route on the default virtual network."""
    return DesiredRoute(
        account_id="acct1",
        tunnel_id="tunnel-a",
        network="192.168.0.0/26",
        comment="office LAN",
    )


@pytest.fixture
def vnet_route() -> DesiredRoute:
    """A route scoped to an explicit virtual network."""
    return DesiredRoute(
        account_id="acct1",
        tunnel_id="tunnel-a",
        network="192.168.0.0/26",
        virtual_network_id="vnet1",
    )


@pytest.fixture
def sample_config(tmp_path: Path, office_route: DesiredRoute) -> TunnelRoutesConfig:
    return TunnelRoutesConfig(
        auth="token",
        token="token-123",
        state_path=tmp_path / "state.json",
        routes={"office": office_route},
    )
