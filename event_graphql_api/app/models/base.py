"""
Schema-checked persistence on top of a MongoDB collection.

A ``DocumentStore`` couples one collection with a pydantic model that
describes the stored document.  Payloads are validated against the
model before they are written, so a missing required field never
reaches the database.  Stores hand documents back as plain dicts with
the generated ``_id`` normalised into a string ``id`` field and every
reference field rendered as a string.
"""

from typing import Any, Dict, Iterable, List, Optional, Type

from bson import ObjectId
from pydantic import BaseModel, ValidationError
from pymongo.database import Database

from ..core.errors import RecordValidationError, validation_error


def to_object_id(value: Any) -> Optional[ObjectId]:
    """Convert ``value`` to an ``ObjectId`` or return ``None`` if it is not one."""
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


class DocumentStore:
    """Base class for the entity stores.

    Subclasses set ``collection_name`` and ``document_model`` and list
    the fields holding references to other documents in
    ``reference_fields``.  ``pre_save`` runs on the validated document
    right before it is inserted.
    """

    collection_name: str = ""
    document_model: Type[BaseModel]
    reference_fields: Iterable[str] = ()

    def __init__(self, database: Database) -> None:
        self.collection = database[self.collection_name]

    @property
    def model_name(self) -> str:
        return self.document_model.__name__.replace("Document", "")

    def validate(self, data: Dict[str, Any]) -> Dict[str, Any]:
        try:
            return self.document_model.model_validate(data).model_dump()
        except ValidationError as exc:
            raise validation_error(self.model_name, exc) from exc

    def pre_save(self, document: Dict[str, Any]) -> None:
        """Hook run before a document is written.  Does nothing by default."""

    def insert(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Validate and insert one document, returning it with its new ``id``."""
        document = self.validate(data)
        self.pre_save(document)
        stored = self._to_mongo(document)
        result = self.collection.insert_one(stored)
        stored["_id"] = result.inserted_id
        return self._from_mongo(stored)

    def find_all(self) -> List[Dict[str, Any]]:
        return [self._from_mongo(raw) for raw in self.collection.find()]

    def find_by_id(self, document_id: Any) -> Optional[Dict[str, Any]]:
        oid = to_object_id(document_id)
        if oid is None:
            return None
        raw = self.collection.find_one({"_id": oid})
        return self._from_mongo(raw) if raw else None

    def delete_by_id(self, document_id: Any) -> bool:
        oid = to_object_id(document_id)
        if oid is None:
            return False
        return self.collection.delete_one({"_id": oid}).deleted_count == 1

    def _to_mongo(self, document: Dict[str, Any]) -> Dict[str, Any]:
        stored = dict(document)
        for field in self.reference_fields:
            value = stored.get(field)
            if isinstance(value, list):
                stored[field] = [to_object_id(item) for item in value]
            elif value is not None:
                oid = to_object_id(value)
                if oid is None:
                    raise RecordValidationError(
                        f"{self.model_name} validation failed: {field}: not a valid identifier"
                    )
                stored[field] = oid
        return stored

    def _from_mongo(self, raw: Dict[str, Any]) -> Dict[str, Any]:
        document = dict(raw)
        document["id"] = str(document.pop("_id"))
        for field in self.reference_fields:
            value = document.get(field)
            if isinstance(value, list):
                document[field] = [str(item) for item in value if item is not None]
            elif value is not None:
                document[field] = str(value)
        return document
