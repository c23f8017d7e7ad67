"""Route identifier encoding.

A route identifier is ``network`` or ``network/virtual_network_id``. Import
identifiers prepend the account: ``account/network[/virtual_network_id]``.
Since ``network`` is CIDR and always holds one ``/`` of its own, import ids
are parsed by fixed segment count: 3 segments without a virtual network,
4 segments with one.
"""

from __future__ import annotations

from dataclasses import dataclass

from tunnelroutes.contracts.exceptions import InvalidImportIdError

_SEPARATOR = "/"


@dataclass(frozen=True)
class ImportId:
    account_id: str
    network: str
    virtual_network_id: str = ""

    @property
    def route_id(self) -> str:
        return format_route_id(self.network, self.virtual_network_id)


def format_route_id(network: str, virtual_network_id: str = "") -> str:
    """Several routes may share a network across virtual networks, so the id carries both."""
    if virtual_network_id:
        return f"{network}{_SEPARATOR}{virtual_network_id}"
    return network


def parse_import_id(import_id: str) -> ImportId:
    """Split ``account/network[/virtual_network_id]`` into its parts.

    Raises:
        InvalidImportIdError: If the id does not have exactly 3 or 4 non-empty segments.
    """
    segments = import_id.split(_SEPARATOR)
    if len(segments) not in (3, 4) or not all(segments):
        raise InvalidImportIdError(import_id)

    account_id = segments[0]
    network = _SEPARATOR.join(segments[1:3])
    virtual_network_id = segments[3] if len(segments) == 4 else ""
    return ImportId(account_id=account_id, network=network, virtual_network_id=virtual_network_id)
