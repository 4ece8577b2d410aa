"""
Pydantic models for user input.

``UserCreate`` mirrors the ``userInput`` GraphQL argument.  The
password arrives in plain text and is hashed by the user store when
the record is saved.
"""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Schema for registering a user."""

    email: str = Field(..., examples=["user@example.com"])
    name: str = Field(..., examples=["Ada"])
    password: str = Field(..., examples=["strongpassword"])
