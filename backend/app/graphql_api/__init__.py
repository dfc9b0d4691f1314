"""
GraphQL API - schema, context and HTTP router.
"""
from strawberry.fastapi import GraphQLRouter

from app.config import Settings
from app.graphql_api.context import GraphQLContext, get_context
from app.graphql_api.schema import build_schema


def create_graphql_router(settings: Settings) -> GraphQLRouter:
    """GraphQL endpoint mounted at /graphql."""
    return GraphQLRouter(build_schema(settings), context_getter=get_context)


__all__ = [
    "GraphQLContext",
    "build_schema",
    "create_graphql_router",
    "get_context",
]
