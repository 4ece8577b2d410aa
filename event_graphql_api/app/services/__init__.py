"""
Service layer.

Each service encapsulates the business logic behind one group of
GraphQL fields.  Services receive the database handle explicitly and
build the entity stores they need from it.
"""
