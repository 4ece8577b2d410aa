"""
Tests for the entity stores
"""
from datetime import datetime, timezone

import pytest
from bson import ObjectId

from event_graphql_api.app.core.errors import ConflictError, RecordValidationError
from event_graphql_api.app.core.security import verify_password
from event_graphql_api.app.models.event import EventStore
from event_graphql_api.app.models.user import UserStore


def _event(**overrides):
    data = {
        "title": "Sailing",
        "description": "Boats",
        "price": 19.99,
        "date": datetime(2020, 1, 1),
        "creator": None,
    }
    data.update(overrides)
    return data


def test_insert_assigns_identifier(database):
    event = EventStore(database).insert(_event())
    assert ObjectId.is_valid(event["id"])
    assert "_id" not in event
    assert database["events"].count_documents({}) == 1


def test_insert_rejects_missing_required_field(database):
    data = _event()
    del data["price"]
    with pytest.raises(RecordValidationError) as excinfo:
        EventStore(database).insert(data)
    assert "price" in excinfo.value.message
    assert excinfo.value.status == 400
    assert database["events"].count_documents({}) == 0


def test_title_is_trimmed_and_must_not_be_blank(database):
    store = EventStore(database)
    assert store.insert(_event(title="  Sailing  "))["title"] == "Sailing"
    with pytest.raises(RecordValidationError):
        store.insert(_event(title="   "))


def test_price_must_be_finite(database):
    store = EventStore(database)
    for price in (float("nan"), float("inf")):
        with pytest.raises(RecordValidationError, match="price"):
            store.insert(_event(price=price))
    assert database["events"].count_documents({}) == 0


def test_aware_dates_are_stored_as_naive_utc(database):
    stored = EventStore(database).insert(
        _event(date=datetime(2020, 1, 1, 12, tzinfo=timezone.utc))
    )
    assert stored["date"] == datetime(2020, 1, 1, 12)


def test_creator_must_be_an_identifier(database):
    with pytest.raises(RecordValidationError):
        EventStore(database).insert(_event(creator="not-an-id"))


def test_find_all_and_find_by_id(database):
    store = EventStore(database)
    first = store.insert(_event(title="One"))
    store.insert(_event(title="Two"))
    assert [e["title"] for e in store.find_all()] == ["One", "Two"]
    assert store.find_by_id(first["id"])["title"] == "One"
    assert store.find_by_id(str(ObjectId())) is None
    assert store.find_by_id("garbage") is None


def test_user_password_is_hashed_on_save(database):
    user = UserStore(database).insert({"email": "a@x.com", "name": "A", "password": "secret"})
    raw = database["users"].find_one({"email": "a@x.com"})
    assert raw["password"] != "secret"
    assert verify_password("secret", raw["password"])
    assert user["created_events"] == []


def test_user_requires_password(database):
    with pytest.raises(RecordValidationError):
        UserStore(database).insert({"email": "a@x.com", "name": "A"})


def test_unique_email_index(database):
    store = UserStore(database)
    store.insert({"email": "a@x.com", "name": "A", "password": "secret"})
    with pytest.raises(ConflictError):
        store.insert({"email": "a@x.com", "name": "B", "password": "other"})
    assert database["users"].count_documents({}) == 1


def test_find_by_email(database):
    store = UserStore(database)
    store.insert({"email": " a@x.com ", "name": "A", "password": "secret"})
    assert store.find_by_email("a@x.com")["name"] == "A"
    assert store.find_by_email("b@x.com") is None


def test_append_created_event(database, owner):
    store = UserStore(database)
    event_id = str(ObjectId())
    assert store.append_created_event(owner["id"], event_id)
    assert store.find_by_id(owner["id"])["created_events"] == [event_id]
    assert not store.append_created_event(str(ObjectId()), event_id)
