"""
Entity stores.

Each store wraps one MongoDB collection of the database handle it is
constructed with.  Stores validate documents before writing them and
return plain dicts keyed by field name.
"""

from .event import EventDocument, EventStore  # noqa: F401
from .user import UserDocument, UserStore  # noqa: F401
