"""
MongoDB integration.

This module builds the ``pymongo`` client from the application
settings and prepares the collections on start-up (``init_db``).
The resulting ``Database`` handle is not kept in module state: the
application stores it on ``app.state`` and passes it down to the
entity stores explicitly.
"""

import logging

from pymongo import ASCENDING, MongoClient
from pymongo.database import Database

from .config import Settings


logger = logging.getLogger(__name__)

EVENTS_COLLECTION = "events"
USERS_COLLECTION = "users"


def get_client(settings: Settings) -> MongoClient:
    """Create a new ``MongoClient`` for the configured URL.

    ``pymongo`` connects lazily, so this does not touch the network.
    """
    return MongoClient(settings.database_url, tz_aware=False)


def get_database(client: MongoClient, settings: Settings) -> Database:
    """Return the configured database from ``client``."""
    return client[settings.mongo_db]


def init_db(database: Database) -> None:
    """Create the indexes the stores rely on.

    ``users.email`` is unique.  ``create_index`` is a no-op when the
    index already exists, so this is safe to run on every start.
    """
    database[USERS_COLLECTION].create_index([("email", ASCENDING)], unique=True)
    database[EVENTS_COLLECTION].create_index([("creator", ASCENDING)])
    logger.info("Database %s initialised", database.name)
