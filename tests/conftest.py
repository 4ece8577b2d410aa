"""
Shared fixtures.

Every test gets a fresh in-memory MongoDB (``mongomock``) and an
application built around it, so nothing touches a real server.
"""
import mongomock
import pytest
from fastapi.testclient import TestClient

from event_graphql_api.app.core.config import Settings
from event_graphql_api.app.core.db import init_db
from event_graphql_api.app.main import create_app
from event_graphql_api.app.models.user import UserStore


@pytest.fixture
def database():
    """Empty in-memory database"""
    client = mongomock.MongoClient()
    client.drop_database("events_test")
    database = client["events_test"]
    init_db(database)
    yield database
    client.drop_database("events_test")
    client.close()


@pytest.fixture
def config():
    return Settings(default_creator_id="", graphiql=True)


@pytest.fixture
def client(database, config):
    """Test client fixture"""
    return TestClient(create_app(database=database, config=config))


@pytest.fixture
def owner(database):
    """A stored user to attribute events to"""
    return UserStore(database).insert(
        {"email": "owner@example.com", "name": "Owner", "password": "hunter2"}
    )


@pytest.fixture
def gql(client):
    """POST one operation to /graphql and return the response"""

    def _run(query, variables=None, headers=None):
        body = {"query": query}
        if variables is not None:
            body["variables"] = variables
        return client.post("/graphql", json=body, headers=headers or {})

    return _run
