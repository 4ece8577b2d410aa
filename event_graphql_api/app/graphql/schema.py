"""GraphQL schema for the event API."""

import strawberry
from strawberry.schema.config import StrawberryConfig

from .resolvers import Mutation, Query
from .types import Numeric, NumericScalar


schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    config=StrawberryConfig(scalar_map={Numeric: NumericScalar}),
)
