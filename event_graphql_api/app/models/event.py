"""Event documents and their store."""

from datetime import datetime, timezone
from typing import Annotated, Optional

from pydantic import BaseModel, Field, StringConstraints, field_validator

from ..core.db import EVENTS_COLLECTION
from .base import DocumentStore


class EventDocument(BaseModel):
    title: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    description: Annotated[str, StringConstraints(min_length=1)]
    price: float = Field(..., allow_inf_nan=False)
    date: datetime
    creator: Optional[str] = Field(None, description="Identifier of the owning user")

    @field_validator("date")
    @classmethod
    def _naive_utc(cls, value: datetime) -> datetime:
        # MongoDB stores UTC without an offset.
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value


class EventStore(DocumentStore):
    collection_name = EVENTS_COLLECTION
    document_model = EventDocument
    reference_fields = ("creator",)
