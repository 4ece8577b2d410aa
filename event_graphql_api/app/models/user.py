"""
User documents and their store.

The password is hashed inside the save lifecycle (``pre_save``), so
no caller can persist a plaintext credential by forgetting to hash
it first.  Email uniqueness is guarded by the unique index created in
``core.db.init_db``.
"""

import logging
from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, Field, StringConstraints
from pymongo.errors import DuplicateKeyError

from ..core.db import USERS_COLLECTION
from ..core.errors import ConflictError
from ..core.security import hash_password
from .base import DocumentStore, to_object_id


logger = logging.getLogger(__name__)

EMAIL_EXISTS = "Email already exists"


class UserDocument(BaseModel):
    email: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    password: Annotated[str, StringConstraints(min_length=1)]
    created_events: List[str] = Field(default_factory=list)


class UserStore(DocumentStore):
    collection_name = USERS_COLLECTION
    document_model = UserDocument
    reference_fields = ("created_events",)

    def pre_save(self, document: Dict[str, Any]) -> None:
        document["password"] = hash_password(document["password"])

    def insert(self, data: Dict[str, Any]) -> Dict[str, Any]:
        try:
            return super().insert(data)
        except DuplicateKeyError as exc:
            logger.warning("Duplicate email rejected by index: %s", data.get("email"))
            raise ConflictError(EMAIL_EXISTS) from exc

    def find_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        raw = self.collection.find_one({"email": email.strip()})
        return self._from_mongo(raw) if raw else None

    def append_created_event(self, user_id: Any, event_id: Any) -> bool:
        """Push ``event_id`` onto the user's ``created_events``.

        Returns ``False`` when no user with ``user_id`` exists.
        """
        user_oid = to_object_id(user_id)
        event_oid = to_object_id(event_id)
        if user_oid is None or event_oid is None:
            return False
        result = self.collection.update_one(
            {"_id": user_oid}, {"$push": {"created_events": event_oid}}
        )
        return result.matched_count == 1
