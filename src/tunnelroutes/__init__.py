"""Public API surface for tunnelroutes."""

__version__ = "0.1.0"

from tunnelroutes.auth import TokenResolver, create_token_resolver
from tunnelroutes.clients import CloudflareRouteClient, InMemoryRouteClient, create_client
from tunnelroutes.config import load_config
from tunnelroutes.contracts import (
    ApplyResult,
    AuthenticationError,
    ConfigError,
    DesiredRoute,
    ImportReadError,
    InvalidImportIdError,
    PlannedChange,
    ProviderError,
    ReconcileAction,
    ReconcileResult,
    RefreshResult,
    RouteClient,
    RouteState,
    StateError,
    StateFile,
    TunnelRoute,
    TunnelRoutesConfig,
    TunnelRoutesError,
)
from tunnelroutes.reconciler import (
    ImportId,
    TunnelRouteImporter,
    TunnelRouteReconciler,
    format_route_id,
    parse_import_id,
)
from tunnelroutes.sdk import TunnelRoutes

__all__ = [
    "ApplyResult",
    "AuthenticationError",
    "CloudflareRouteClient",
    "ConfigError",
    "DesiredRoute",
    "ImportId",
    "ImportReadError",
    "InMemoryRouteClient",
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
    "TokenResolver",
    "TunnelRoute",
    "TunnelRouteImporter",
    "TunnelRouteReconciler",
    "TunnelRoutes",
    "TunnelRoutesConfig",
    "TunnelRoutesError",
    "__version__",
    "create_client",
    "create_token_resolver",
    "format_route_id",
    "load_config",
    "parse_import_id",
]
