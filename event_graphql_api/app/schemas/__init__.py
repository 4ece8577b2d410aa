"""
Pydantic schema definitions for operation inputs.

Input schemas coerce the raw GraphQL arguments (numbers sent as
strings, ISO date strings) into typed values before they reach the
services.  They are kept apart from the stored document models in
``models``.
"""
