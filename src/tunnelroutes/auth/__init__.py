"""Auth module public exports."""

from tunnelroutes.auth.base import TokenResolver
from tunnelroutes.auth.factory import create_token_resolver

__all__ = ["TokenResolver", "create_token_resolver"]
