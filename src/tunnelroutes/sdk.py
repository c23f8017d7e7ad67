"""SDK composition root for tunnelroutes."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from tunnelroutes.auth import TokenResolver, create_token_resolver
from tunnelroutes.clients.factory import MEMORY_API_URL, create_client
from tunnelroutes.config import load_config
from tunnelroutes.contracts.client import RouteClient
from tunnelroutes.contracts.config import TunnelRoutesConfig
from tunnelroutes.contracts.exceptions import StateError
from tunnelroutes.contracts.reconcile import (
    ApplyResult,
    PlannedChange,
    ReconcileAction,
    ReconcileResult,
    RefreshResult,
)
from tunnelroutes.contracts.state import DesiredRoute, RouteState, StateFile
from tunnelroutes.reconciler import TunnelRouteImporter, TunnelRouteReconciler
from tunnelroutes.state import load_state, persist_state

logger = logging.getLogger(__name__)


class TunnelRoutes:
    """tunnelroutes SDK public API.

    Each operation loads the state file, opens the client, works through the
    routes one at a time and writes the state file back, even when a later
    route fails.
    """

    def __init__(
        self,
        *,
        config: TunnelRoutesConfig,
        client: RouteClient | None = None,
        token_resolver: TokenResolver | None = None,
    ) -> None:
        self._config = config
        self._client = client
        self._token_resolver = token_resolver

    @classmethod
    async def from_config(cls, config: TunnelRoutesConfig) -> TunnelRoutes:
        token_resolver = None if config.api_url == MEMORY_API_URL else create_token_resolver(config)
        return cls(config=config, token_resolver=token_resolver)

    @classmethod
    async def from_config_file(cls, path: str) -> TunnelRoutes:
        return await cls.from_config(load_config(path))

    @property
    def config(self) -> TunnelRoutesConfig:
        return self._config

    async def apply(self, *, dry_run: bool = False) -> ApplyResult:
        """Reconcile every declared route and delete routes no longer declared.

        A stored route whose natural key matches a newly declared name is
        carried over to that name. Remaining orphans are deleted before any
        declared route is created, so a network can move between names.
        """
        state = load_state(self._config.state_path)
        self._adopt_renamed(state)
        results: list[ReconcileResult] = []
        client = await self._get_client()
        try:
            async with client:
                reconciler = TunnelRouteReconciler(client)
                orphaned = [name for name in state.resources if name not in self._config.routes]
                for name in orphaned:
                    stored = state.resources[name]
                    if stored.exists and not dry_run:
                        await reconciler.delete(stored)
                    if not dry_run:
                        del state.resources[name]
                    results.append(
                        ReconcileResult(
                            name=name,
                            change=PlannedChange(action=ReconcileAction.DELETE),
                            state=stored.model_copy(update={"id": ""}),
                            dry_run=dry_run,
                        )
                    )

                for name, desired in self._config.routes.items():
                    result = await reconciler.reconcile(
                        desired, state.resources.get(name), name=name, dry_run=dry_run
                    )
                    results.append(result)
                    if not dry_run:
                        self._store(state, name, result.state)
                    logger.info("%s: %s", name, result.change.action.value)
        finally:
            if not dry_run:
                persist_state(state, self._config.state_path)
        return ApplyResult(results=results, dry_run=dry_run)

    async def refresh(self) -> RefreshResult:
        """Read every stored route back from the API, dropping those that vanished."""
        state = load_state(self._config.state_path)
        result = RefreshResult()
        client = await self._get_client()
        try:
            async with client:
                reconciler = TunnelRouteReconciler(client)
                for name, stored in list(state.resources.items()):
                    observed = await reconciler.read(stored)
                    self._store(state, name, observed)
                    if observed.exists:
                        result.refreshed.append(name)
                    else:
                        result.vanished.append(name)
        finally:
            persist_state(state, self._config.state_path)
        return result

    async def import_route(self, name: str, import_id: str) -> RouteState:
        """Adopt an existing remote route under *name*."""
        state = load_state(self._config.state_path)
        existing = state.resources.get(name)
        if existing is not None and existing.exists:
            raise StateError(f"resource {name!r} is already managed as {existing.id!r}")
        if name not in self._config.routes:
            logger.warning("Imported resource %r is not declared in the config and will be deleted on apply", name)

        client = await self._get_client()
        async with client:
            observed = await TunnelRouteImporter(TunnelRouteReconciler(client)).import_route(import_id)
        state.resources[name] = observed
        persist_state(state, self._config.state_path)
        return observed

    async def destroy(self, names: Iterable[str] | None = None) -> ApplyResult:
        """Delete the named stored routes, or all of them."""
        state = load_state(self._config.state_path)
        selected = list(names) if names is not None else list(state.resources)
        unknown = [name for name in selected if name not in state.resources]
        if unknown:
            raise StateError(f"no such resource in state: {', '.join(unknown)}")

        results: list[ReconcileResult] = []
        client = await self._get_client()
        try:
            async with client:
                reconciler = TunnelRouteReconciler(client)
                for name in selected:
                    stored = state.resources[name]
                    if stored.exists:
                        await reconciler.delete(stored)
                    del state.resources[name]
                    results.append(
                        ReconcileResult(
                            name=name,
                            change=PlannedChange(action=ReconcileAction.DELETE),
                            state=stored.model_copy(update={"id": ""}),
                        )
                    )
        finally:
            persist_state(state, self._config.state_path)
        return ApplyResult(results=results)

    async def _get_client(self) -> RouteClient:
        if self._client is None:
            token = await self._token_resolver.resolve() if self._token_resolver is not None else ""
            self._client = create_client(self._config, token=token)
        return self._client

    @staticmethod
    def _store(state: StateFile, name: str, observed: RouteState) -> None:
        if observed.exists:
            state.resources[name] = observed
        else:
            state.resources.pop(name, None)

    def _adopt_renamed(self, state: StateFile) -> None:
        undeclared = {
            _natural_key(stored): name
            for name, stored in state.resources.items()
            if name not in self._config.routes
        }
        for name, desired in self._config.routes.items():
            if name in state.resources:
                continue
            previous = undeclared.pop(_natural_key(desired), None)
            if previous is not None:
                logger.info("Route %s was renamed to %s", previous, name)
                state.resources[name] = state.resources.pop(previous)


def _natural_key(route: DesiredRoute | RouteState) -> tuple[str, str, str]:
    return (route.account_id, route.network, route.virtual_network_id)
