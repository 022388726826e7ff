"""Mounts the GraphQL schema on FastAPI, with GraphiQL for interactive use."""

from strawberry.fastapi import GraphQLRouter

from app.config import Settings
from app.presentation.graphql.context import get_graphql_context
from app.presentation.graphql.schema import schema


def build_graphql_router(settings: Settings) -> GraphQLRouter:
    return GraphQLRouter(
        schema,
        path=settings.graphql_path,
        graphql_ide="graphiql" if settings.graphiql_enabled else None,
        context_getter=get_graphql_context,
    )
