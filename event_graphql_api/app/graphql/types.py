"""GraphQL types for the event API."""

from datetime import datetime
from typing import Any, Dict, List, NewType, Optional, Union

import strawberry


def _parse_numeric(value: Any) -> Union[int, float, str]:
    # Numbers and numeric strings pass through; EventCreate does the coercion.
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(f"Numeric cannot represent value: {value!r}")
    return value


Numeric = NewType("Numeric", str)

NumericScalar = strawberry.scalar(
    name="Numeric",
    description="A number, or a string holding one.",
    serialize=lambda value: value,
    parse_value=_parse_numeric,
)


@strawberry.type
class Event:
    """Event GraphQL type."""

    id: strawberry.ID
    title: str
    description: str
    price: float
    date: datetime
    creator: Optional[strawberry.ID] = None

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Event":
        return cls(
            id=strawberry.ID(document["id"]),
            title=document["title"],
            description=document["description"],
            price=document["price"],
            date=document["date"],
            creator=document.get("creator"),
        )


@strawberry.type
class User:
    """User GraphQL type.  ``password`` is never the stored hash."""

    id: strawberry.ID
    email: str
    name: str
    password: Optional[str] = None
    created_events: List[strawberry.ID] = strawberry.field(default_factory=list)

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "User":
        return cls(
            id=strawberry.ID(document["id"]),
            email=document["email"],
            name=document["name"],
            password=document.get("password"),
            created_events=[strawberry.ID(item) for item in document.get("created_events", [])],
        )


@strawberry.input
class EventInput:
    """Input for creating an event."""

    title: str
    description: str
    price: Numeric
    date: str


@strawberry.input
class UserInput:
    """Input for registering a user."""

    email: str
    name: str
    password: str
