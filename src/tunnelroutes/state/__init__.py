"""State store persistence."""

from tunnelroutes.state.store import load_state, persist_state

__all__ = ["load_state", "persist_state"]
