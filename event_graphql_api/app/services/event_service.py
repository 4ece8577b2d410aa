"""
Business logic for events.

Creating an event writes two documents: the event itself and the
back-reference on its creator's ``created_events``.  MongoDB does not
wrap those in one transaction here, so a failed back-reference update
removes the freshly inserted event again.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError
from pymongo.database import Database

from ..core.errors import NotFoundError, validation_error
from ..models.event import EventStore
from ..models.user import UserStore
from ..schemas.event import EventCreate


logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found."


class EventService:
    """Operations on events backed by ``EventStore`` and ``UserStore``."""

    @classmethod
    async def list_events(cls, database: Database) -> List[Dict[str, Any]]:
        """Return all events; no filtering or pagination."""
        return EventStore(database).find_all()

    @classmethod
    async def create_event(
        cls,
        database: Database,
        data: Mapping[str, Any],
        creator_id: Optional[str],
    ) -> Dict[str, Any]:
        """Create an event owned by ``creator_id`` and link it to that user.

        ``price`` and ``date`` are coerced by ``EventCreate``.  The owner
        must exist before anything is written.  If linking the event to
        the owner fails, the event is deleted and the error re-raised.
        """
        try:
            try:
                payload = EventCreate.model_validate(dict(data))
            except ValidationError as exc:
                raise validation_error("Event", exc) from exc
            logger.info("User %s is creating event '%s'", creator_id, payload.title)

            users = UserStore(database)
            if not creator_id or users.find_by_id(creator_id) is None:
                raise NotFoundError(USER_NOT_FOUND)

            events = EventStore(database)
            event = events.insert({**payload.model_dump(), "creator": creator_id})
            try:
                linked = users.append_created_event(creator_id, event["id"])
            except Exception:
                cls._discard(events, event["id"])
                raise
            if not linked:
                # Owner vanished between the lookup and the update.
                cls._discard(events, event["id"])
                raise NotFoundError(USER_NOT_FOUND)
        except Exception:
            logger.exception("Failed to create event '%s'", data.get("title"))
            raise
        return event

    @staticmethod
    def _discard(events: EventStore, event_id: str) -> None:
        if events.delete_by_id(event_id):
            logger.warning("Rolled back event %s after failed owner update", event_id)
        else:
            logger.error("Could not roll back event %s; it has no owner back-reference", event_id)
