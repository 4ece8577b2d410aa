"""
Application package initializer.

The project is organised into small layers: ``core`` holds
configuration, logging, errors, password hashing and the database
handle; ``models`` holds the entity stores; ``schemas`` the pydantic
input models; ``services`` the business logic behind each GraphQL
field; and ``graphql`` the strawberry types and schema that the
FastAPI application in ``main`` mounts under ``/graphql``.
"""

from .main import app  # noqa: F401
