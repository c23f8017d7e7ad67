"""Adopt existing remote routes into the state store."""

from __future__ import annotations

import logging

from tunnelroutes.contracts.exceptions import ImportReadError, ProviderError
from tunnelroutes.contracts.state import RouteState
from tunnelroutes.reconciler.identifier import parse_import_id
from tunnelroutes.reconciler.reconciler import TunnelRouteReconciler

logger = logging.getLogger(__name__)


class TunnelRouteImporter:
    def __init__(self, reconciler: TunnelRouteReconciler) -> None:
        self._reconciler = reconciler

    async def import_route(self, import_id: str) -> RouteState:
        """Seed a state record from ``account/network[/virtual_network_id]`` and read it back.

        Raises:
            InvalidImportIdError: If *import_id* has the wrong shape.
            ImportReadError: If the route cannot be read or does not exist.
        """
        parsed = parse_import_id(import_id)
        seeded = RouteState(
            id=parsed.route_id,
            account_id=parsed.account_id,
            network=parsed.network,
            virtual_network_id=parsed.virtual_network_id,
        )
        logger.debug("Importing Tunnel Route %s from account %s", seeded.id, seeded.account_id)

        try:
            observed = await self._reconciler.read(seeded)
        except ProviderError as exc:
            raise ImportReadError("failed to read Tunnel Route state") from exc
        if not observed.exists:
            raise ImportReadError(f"failed to read Tunnel Route state: no route found for id {import_id!r}")
        return observed
