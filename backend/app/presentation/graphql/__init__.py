"""
GraphQL API Package
===================
Strawberry GraphQL schema for eye-disease records.
"""

from .router import build_graphql_router
from .schema import schema

__all__ = ["build_graphql_router", "schema"]
