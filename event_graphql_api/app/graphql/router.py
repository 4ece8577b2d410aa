"""
HTTP binding of the GraphQL schema.

``EnvelopeGraphQLRouter`` is strawberry's FastAPI router with two
changes.  An operation that produced errors is not returned as a
``{"data", "errors"}`` body; its first error is raised as an
``ApiError`` instead.  Requests strawberry rejects before executing
anything (unparseable body, missing query) are raised as ``ApiError``
too, rather than answered in plain text.  The application's exception
handler renders both as the JSON error envelope.
"""

import logging
from typing import Any, Dict

from fastapi import Request
from graphql import GraphQLError
from strawberry.fastapi import GraphQLRouter
# The router catches this class itself; its home module differs between
# strawberry releases.
from strawberry.fastapi.router import HTTPException as TransportError

from ..core.errors import ApiError
from ..core.security import get_caller_id
from .schema import schema


logger = logging.getLogger(__name__)


def to_api_error(error: GraphQLError) -> ApiError:
    """Map a GraphQL error onto the application's error types.

    Errors raised on purpose keep their status.  Errors without an
    underlying exception come from parsing or validating the query and
    map to 400.  Anything else is a 500.
    """
    original = error.original_error
    if isinstance(original, ApiError):
        return original
    if original is None:
        return ApiError(error.message, status=400)
    return ApiError(str(original) or error.message)


class EnvelopeGraphQLRouter(GraphQLRouter):
    async def run(self, *args, **kwargs):
        try:
            return await super().run(*args, **kwargs)
        except TransportError as exc:
            raise ApiError(exc.reason, status=exc.status_code) from exc

    async def process_result(self, request, result):
        if result.errors:
            for error in result.errors[1:]:
                logger.debug("Additional GraphQL error: %s", error.message)
            raise to_api_error(result.errors[0])
        return await super().process_result(request, result)


async def get_context(request: Request) -> Dict[str, Any]:
    """Per-request GraphQL context: database handle and caller identity."""
    return {
        "database": request.app.state.database,
        "caller_id": get_caller_id(request, request.app.state.settings.default_creator_id),
    }


def build_graphql_router(graphiql: bool = True) -> GraphQLRouter:
    return EnvelopeGraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if graphiql else None,
    )
