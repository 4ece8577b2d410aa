"""
Tests for the GraphQL schema definition
"""
import warnings

import strawberry
from strawberry.schema.config import StrawberryConfig

from event_graphql_api.app.graphql.resolvers import Mutation, Query
from event_graphql_api.app.graphql.schema import schema
from event_graphql_api.app.graphql.types import Numeric, NumericScalar


def test_numeric_scalar_is_declared():
    sdl = str(schema)
    assert "scalar Numeric" in sdl
    assert "price: Numeric!" in sdl


def test_schema_builds_without_deprecation_warnings():
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        strawberry.Schema(
            query=Query,
            mutation=Mutation,
            config=StrawberryConfig(scalar_map={Numeric: NumericScalar}),
        )
    assert not [w for w in caught if issubclass(w.category, DeprecationWarning)]
