"""Tunnel route reconciliation."""

from tunnelroutes.reconciler.identifier import ImportId, format_route_id, parse_import_id
from tunnelroutes.reconciler.importer import TunnelRouteImporter
from tunnelroutes.reconciler.reconciler import TunnelRouteReconciler

__all__ = [
    "ImportId",
    "TunnelRouteImporter",
    "TunnelRouteReconciler",
    "format_route_id",
    "parse_import_id",
]
