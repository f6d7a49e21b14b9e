"""Concrete token resolvers."""

from mergedprs.auth.resolvers.env import EnvTokenResolver
from mergedprs.auth.resolvers.gh_cli import GhCliTokenResolver
from mergedprs.auth.resolvers.static import StaticTokenResolver

__all__ = ["EnvTokenResolver", "GhCliTokenResolver", "StaticTokenResolver"]
