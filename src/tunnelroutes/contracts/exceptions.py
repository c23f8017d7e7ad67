"""Exception hierarchy for tunnelroutes.

All tunnelroutes exceptions inherit from :class:`TunnelRoutesError`, making it
easy to catch any library error with a single ``except`` clause while still
allowing callers to handle specific failure modes.
"""

from __future__ import annotations


class TunnelRoutesError(Exception):
    """Base exception for all tunnelroutes errors."""


class ConfigError(TunnelRoutesError):
    """Configuration loading or validation failure."""


class StateError(TunnelRoutesError):
    """State file loading or persistence failure."""


class ProviderError(TunnelRoutesError):
    """Remote API call failed (transport or service-reported)."""


class AuthenticationError(ProviderError):
    """Authentication/authorization failure."""


class InvalidImportIdError(TunnelRoutesError):
    """Import identifier does not match any accepted format.

    Attributes:
        import_id: The offending identifier string.
    """

    def __init__(self, import_id: str) -> None:
        self.import_id = import_id
        super().__init__(
            f"invalid id ({import_id!r}) specified, should be in format "
            '"accountID/network" or "accountID/network/virtual_network_id"'
        )


class ImportReadError(TunnelRoutesError):
    """Reading the remote route during import failed."""
