"""
Logging setup for the API process.

Everything goes through the root logger with one console handler
(plus a file handler when ``LOG_FILE`` is set).  Two third-party
loggers are tuned on top of that:

* ``strawberry.execution`` logs every resolver exception with a
  traceback.  Errors the gateway answers with a 4xx status (duplicate
  email, missing owner, bad input) are already logged by the services,
  so those records are dropped; 5xx failures still get the traceback.
* ``pymongo`` is held at WARNING so connection-pool chatter does not
  drown the request logs at DEBUG.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
GRAPHQL_LOGGER = "strawberry.execution"
DRIVER_LOGGER = "pymongo"


class ServerErrorsOnly(logging.Filter):
    """Let a record through unless its exception carries a status below 500."""

    def filter(self, record: logging.LogRecord) -> bool:
        error = record.exc_info[1] if record.exc_info else None
        return getattr(error, "status", 500) >= 500


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure logging once per process.

    ``level`` is a level name such as ``"DEBUG"``; unknown names fall
    back to ``INFO``.  Root handlers are only installed when the root
    logger has none yet; the third-party logger tweaks are idempotent.
    """
    graphql_logger = logging.getLogger(GRAPHQL_LOGGER)
    if not any(isinstance(f, ServerErrorsOnly) for f in graphql_logger.filters):
        graphql_logger.addFilter(ServerErrorsOnly())
    logging.getLogger(DRIVER_LOGGER).setLevel(logging.WARNING)

    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
