"""Public contracts for tunnelroutes."""

from tunnelroutes.contracts.client import RouteClient
from tunnelroutes.contracts.config import DEFAULT_API_URL, TunnelRoutesConfig
from tunnelroutes.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    ImportReadError,
    InvalidImportIdError,
    ProviderError,
    StateError,
    TunnelRoutesError,
)
from tunnelroutes.contracts.reconcile import (
    ApplyResult,
    PlannedChange,
    ReconcileAction,
    ReconcileResult,
    RefreshResult,
)
from tunnelroutes.contracts.route import (
    TunnelRoute,
    TunnelRouteCreateParams,
    TunnelRouteDeleteParams,
    TunnelRouteListParams,
    TunnelRouteUpdateParams,
)
from tunnelroutes.contracts.state import DesiredRoute, RouteState, StateFile

__all__ = [
    "DEFAULT_API_URL",
    "ApplyResult",
    "AuthenticationError",
    "ConfigError",
    "DesiredRoute",
    "ImportReadError",
    "InvalidImportIdError",
    "PlannedChange",
    "ProviderError",
    "ReconcileAction",
    "ReconcileResult",
    "RefreshResult",
    "RouteClient",
    "RouteState",
    "StateError",
    "StateFile",
    "TunnelRoute",
    "TunnelRouteCreateParams",
    "TunnelRouteDeleteParams",
    "TunnelRouteListParams",
    "TunnelRouteUpdateParams",
    "TunnelRoutesConfig",
    "TunnelRoutesError",
]
