"""
Pydantic models for event input.

``EventCreate`` mirrors the ``eventInput`` GraphQL argument.  Its
fields are deliberately lax: ``price`` accepts numbers and numeric
strings (but not NaN or infinities), ``date`` accepts ISO date or
datetime strings.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class EventCreate(BaseModel):
    """Schema for creating an event."""

    title: str = Field(..., examples=["Sailing"])
    description: str = Field(..., examples=["Boats"])
    price: float = Field(..., allow_inf_nan=False, examples=[19.99])
    date: datetime = Field(..., examples=["2020-01-01"])
