"""
Business logic for users.

Passwords never leave this layer: ``list_users`` masks them and
``create_user`` blanks them out of the returned record.
"""

import logging
from typing import Any, Dict, List, Mapping

from pydantic import ValidationError
from pymongo.database import Database

from ..core.errors import ConflictError, validation_error
from ..models.user import EMAIL_EXISTS, UserStore
from ..schemas.user import UserCreate


logger = logging.getLogger(__name__)

PASSWORD_MASK = "********"


class UserService:
    """Operations on users backed by ``UserStore``."""

    @classmethod
    async def list_users(cls, database: Database) -> List[Dict[str, Any]]:
        """Return every user with the password replaced by ``PASSWORD_MASK``."""
        users = UserStore(database).find_all()
        for user in users:
            user["password"] = PASSWORD_MASK
        return users

    @classmethod
    async def create_user(cls, database: Database, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Register a new user.

        Rejects an email that is already taken with ``ConflictError``.
        The password is hashed by the store while saving; the returned
        record has ``password`` set to ``None``.
        """
        try:
            try:
                payload = UserCreate.model_validate(dict(data))
            except ValidationError as exc:
                raise validation_error("User", exc) from exc
            logger.info("Registering user %s", payload.email)
            store = UserStore(database)
            if store.find_by_email(payload.email) is not None:
                raise ConflictError(EMAIL_EXISTS)
            user = store.insert(payload.model_dump())
        except Exception:
            logger.exception("Failed to register user %s", data.get("email"))
            raise
        user["password"] = None
        return user
