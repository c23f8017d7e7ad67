"""Request/response mapping for the Cloudflare teamnet routes API."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from pydantic import ValidationError

from tunnelroutes.contracts.exceptions import ProviderError
from tunnelroutes.contracts.route import TunnelRoute, TunnelRouteListParams


def routes_path(account_id: str) -> str:
    return f"/accounts/{quote(account_id, safe='')}/teamnet/routes"


def network_path(account_id: str, network: str) -> str:
    # The CIDR slash must be escaped so the network stays one path segment.
    return f"{routes_path(account_id)}/network/{quote(network, safe='')}"


def list_query(params: TunnelRouteListParams, *, page: int, per_page: int) -> dict[str, str]:
    query = {
        "is_deleted": "true" if params.is_deleted else "false",
        "page": str(page),
        "per_page": str(per_page),
    }
    optional = {
        "network_subset": params.network_subset,
        "network_superset": params.network_superset,
        "virtual_network_id": params.virtual_network_id,
        "tunnel_id": params.tunnel_id,
        "comment": params.comment,
    }
    query.update({key: value for key, value in optional.items() if value})
    return query


def format_api_errors(payload: Any) -> str:
    """Render the ``errors`` array of an API envelope as ``"code: message"`` pairs."""
    if not isinstance(payload, dict):
        return "unexpected response payload"
    errors = payload.get("errors") or []
    rendered: list[str] = []
    for error in errors:
        if isinstance(error, dict):
            code = error.get("code")
            message = error.get("message", "")
            rendered.append(f"{code}: {message}" if code is not None else str(message))
        else:
            rendered.append(str(error))
    return "; ".join(rendered) or "unknown error"


def parse_route(result: Any) -> TunnelRoute:
    if not isinstance(result, dict):
        raise ProviderError("tunnel route response is missing a result object")
    try:
        return TunnelRoute.model_validate(result)
    except ValidationError as exc:
        raise ProviderError(f"malformed tunnel route in response: {exc}") from exc


def parse_routes(result: Any) -> list[TunnelRoute]:
    if result is None:
        return []
    if not isinstance(result, list):
        raise ProviderError("tunnel route list response is not an array")
    return [parse_route(entry) for entry in result]


def total_pages(payload: dict[str, Any]) -> int:
    info = payload.get("result_info")
    if not isinstance(info, dict):
        return 1
    value = info.get("total_pages")
    return value if isinstance(value, int) and value > 0 else 1
