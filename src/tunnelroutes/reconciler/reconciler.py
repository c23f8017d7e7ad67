"""Tunnel route reconciler.

Translates a declared :class:`DesiredRoute` into the remote calls that make
the API match it, and keeps the :class:`RouteState` record in line with what
the API reports.
"""

from __future__ import annotations

import logging

from tunnelroutes.contracts.client import RouteClient
from tunnelroutes.contracts.exceptions import ProviderError
from tunnelroutes.contracts.reconcile import PlannedChange, ReconcileAction, ReconcileResult
from tunnelroutes.contracts.route import (
    TunnelRouteCreateParams,
    TunnelRouteDeleteParams,
    TunnelRouteListParams,
    TunnelRouteUpdateParams,
)
from tunnelroutes.contracts.state import DesiredRoute, RouteState
from tunnelroutes.reconciler.identifier import format_route_id

logger = logging.getLogger(__name__)

# Changing any of these addresses a different remote route.
_KEY_FIELDS = ("account_id", "network", "virtual_network_id")
_MUTABLE_FIELDS = ("tunnel_id", "comment")


class TunnelRouteReconciler:
    """CRUD and planning for a single tunnel route entity."""

    def __init__(self, client: RouteClient) -> None:
        self._client = client

    async def read(self, state: RouteState) -> RouteState:
        """Refresh *state* from the API.

        Returns a copy with ``id`` cleared when the route no longer exists; all
        other fields are left as they were in that case.

        Raises:
            ProviderError: If the list call fails.
        """
        params = TunnelRouteListParams(
            account_id=state.account_id,
            is_deleted=False,
            network_subset=state.network,
            network_superset=state.network,
            virtual_network_id=state.virtual_network_id,
        )
        try:
            routes = await self._client.list_routes(params)
        except ProviderError as exc:
            raise ProviderError(f"failed to fetch Tunnel Route: {exc}") from exc

        if not routes:
            logger.info("Tunnel Route for network %s in account %s not found", state.network, state.account_id)
            return state.model_copy(update={"id": ""})

        route = routes[0]
        observed: dict[str, str] = {"tunnel_id": route.tunnel_id, "network": route.network}
        if route.comment:
            observed["comment"] = route.comment
        # The API always reports a virtual network, but routes created before
        # virtual networks existed never declared one.
        if state.virtual_network_id:
            observed["virtual_network_id"] = route.virtual_network_id
        return state.model_copy(update=observed)

    async def create(self, desired: DesiredRoute) -> RouteState:
        params = TunnelRouteCreateParams(
            account_id=desired.account_id,
            tunnel_id=desired.tunnel_id,
            network=desired.network,
            virtual_network_id=desired.virtual_network_id,
            comment=desired.comment,
        )
        try:
            created = await self._client.create_route(params)
        except ProviderError as exc:
            raise ProviderError(f'error creating Tunnel Route for Network "{desired.network}": {exc}') from exc

        route_id = format_route_id(created.network, desired.virtual_network_id)
        logger.info("Created Tunnel Route %s in account %s", route_id, desired.account_id)
        return await self.read(desired.to_state(id=route_id))

    async def update(self, desired: DesiredRoute, state: RouteState) -> RouteState:
        """Replace the mutable fields of the route; an empty comment clears it remotely."""
        params = TunnelRouteUpdateParams(
            account_id=desired.account_id,
            tunnel_id=desired.tunnel_id,
            network=desired.network,
            virtual_network_id=desired.virtual_network_id,
            comment=desired.comment,
        )
        try:
            await self._client.update_route(params)
        except ProviderError as exc:
            raise ProviderError(f'error updating Tunnel Route for Network "{desired.network}": {exc}') from exc

        logger.info("Updated Tunnel Route %s in account %s", state.id, desired.account_id)
        return await self.read(desired.to_state(id=state.id))

    async def delete(self, state: RouteState) -> None:
        params = TunnelRouteDeleteParams(
            account_id=state.account_id,
            network=state.network,
            virtual_network_id=state.virtual_network_id,
        )
        try:
            await self._client.delete_route(params)
        except ProviderError as exc:
            raise ProviderError(f'error deleting Tunnel Route for Network "{state.network}": {exc}') from exc
        logger.info("Deleted Tunnel Route %s in account %s", state.id or state.network, state.account_id)

    def plan(self, desired: DesiredRoute, state: RouteState) -> PlannedChange:
        if not state.exists:
            return PlannedChange(action=ReconcileAction.CREATE, changed_fields=list(_KEY_FIELDS + _MUTABLE_FIELDS))

        wanted = desired.model_dump()
        key_changes = [name for name in _KEY_FIELDS if wanted[name] != getattr(state, name)]
        mutable_changes = [name for name in _MUTABLE_FIELDS if wanted[name] != getattr(state, name)]
        if key_changes:
            return PlannedChange(action=ReconcileAction.REPLACE, changed_fields=key_changes + mutable_changes)
        if mutable_changes:
            return PlannedChange(action=ReconcileAction.UPDATE, changed_fields=mutable_changes)
        return PlannedChange(action=ReconcileAction.NOOP)

    async def reconcile(
        self,
        desired: DesiredRoute,
        state: RouteState | None = None,
        *,
        name: str = "",
        dry_run: bool = False,
    ) -> ReconcileResult:
        """Converge the remote route towards *desired*.

        A stored record is refreshed first so the plan is made against what the
        API reports. With *dry_run* no mutating call is issued.
        """
        current = state or RouteState()
        if current.exists:
            current = await self.read(current)

        change = self.plan(desired, current)
        if dry_run or change.action is ReconcileAction.NOOP:
            return ReconcileResult(name=name, change=change, state=current, dry_run=dry_run)

        if change.action is ReconcileAction.CREATE:
            observed = await self.create(desired)
        elif change.action is ReconcileAction.UPDATE:
            observed = await self.update(desired, current)
        else:
            await self.delete(current)
            observed = await self.create(desired)
        return ReconcileResult(name=name, change=change, state=observed)
