"""
GraphQL resolvers for the event API.

Resolvers only translate between GraphQL types and the service layer.
The database handle and the caller identity come from the request
context built in ``router.get_context``.
"""

import dataclasses
from typing import List

import strawberry

from ..services.event_service import EventService
from ..services.user_service import UserService
from .types import Event, EventInput, User, UserInput


@strawberry.type
class Query:
    """Root query type."""

    @strawberry.field
    async def events(self, info: strawberry.Info) -> List[Event]:
        """All events."""
        documents = await EventService.list_events(info.context["database"])
        return [Event.from_document(document) for document in documents]

    @strawberry.field
    async def users(self, info: strawberry.Info) -> List[User]:
        """All users, passwords masked."""
        documents = await UserService.list_users(info.context["database"])
        return [User.from_document(document) for document in documents]


@strawberry.type
class Mutation:
    """Root mutation type."""

    @strawberry.mutation
    async def create_event(self, event_input: EventInput, info: strawberry.Info) -> Event:
        """Create an event owned by the calling user."""
        document = await EventService.create_event(
            info.context["database"],
            dataclasses.asdict(event_input),
            creator_id=info.context.get("caller_id"),
        )
        return Event.from_document(document)

    @strawberry.mutation
    async def create_user(self, user_input: UserInput, info: strawberry.Info) -> User:
        """Register a user.  The returned ``password`` is always null."""
        document = await UserService.create_user(
            info.context["database"], dataclasses.asdict(user_input)
        )
        return User.from_document(document)
