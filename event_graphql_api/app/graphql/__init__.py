"""GraphQL layer: strawberry types, resolvers and the executable schema."""

from .schema import schema  # noqa: F401
