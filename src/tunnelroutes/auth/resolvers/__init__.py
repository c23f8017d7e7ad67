"""Built-in token resolvers."""

from tunnelroutes.auth.resolvers.env import TOKEN_ENV_VAR, EnvTokenResolver
from tunnelroutes.auth.resolvers.static import StaticTokenResolver

__all__ = ["TOKEN_ENV_VAR", "EnvTokenResolver", "StaticTokenResolver"]
