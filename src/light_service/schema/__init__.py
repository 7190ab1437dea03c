"""GraphQL schema"""

import strawberry
from strawberry.fastapi import GraphQLRouter
from starlette.requests import Request

from light_service.schema.types import (
    Color,
    Light,
    LightUnavailable,
    ResultResolutionError,
    TurnOnOffLightResult,
    TurnOnOffLightSuccess,
)
from light_service.schema.queries import Query
from light_service.schema.mutations import Mutation


schema = strawberry.Schema(
    query=Query,
    mutation=Mutation
)


async def get_context(request: Request):
    """
    Create context for each GraphQL request.
    The LightService is built once in the app lifespan and shared.
    """
    return {
        "request": request,
        "light_service": request.app.state.light_service,
    }


def create_graphql_router() -> GraphQLRouter:
    """Create GraphQL router for FastAPI"""
    return GraphQLRouter(
        schema,
        graphql_ide="graphiql",
        context_getter=get_context,
    )


__all__ = [
    "schema",
    "create_graphql_router",
    "get_context",
    "Color",
    "Light",
    "LightUnavailable",
    "ResultResolutionError",
    "TurnOnOffLightResult",
    "TurnOnOffLightSuccess",
    "Query",
    "Mutation",
]
