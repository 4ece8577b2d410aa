"""
Tests for logging setup
"""
import logging

from event_graphql_api.app.core.errors import ConflictError
from event_graphql_api.app.core.logging_config import GRAPHQL_LOGGER, ServerErrorsOnly, setup_logging


def _record(error):
    exc_info = (type(error), error, None) if error is not None else None
    return logging.LogRecord(GRAPHQL_LOGGER, logging.ERROR, __file__, 1, "failed", None, exc_info)


def test_client_errors_are_dropped():
    assert not ServerErrorsOnly().filter(_record(ConflictError("Email already exists")))


def test_server_errors_are_kept():
    assert ServerErrorsOnly().filter(_record(RuntimeError("database down")))
    assert ServerErrorsOnly().filter(_record(None))


def test_setup_is_idempotent():
    setup_logging("INFO")
    setup_logging("DEBUG")
    filters = [f for f in logging.getLogger(GRAPHQL_LOGGER).filters if isinstance(f, ServerErrorsOnly)]
    assert len(filters) == 1
    assert logging.getLogger("pymongo").level == logging.WARNING
