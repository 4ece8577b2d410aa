"""Entry point for the Event GraphQL API.

Serves ``event_graphql_api.app.main:app`` with Uvicorn.  Host and port
come from the ``HOST`` and ``PORT`` environment variables; MongoDB
credentials and the database name from ``MONGO_*`` (see
``event_graphql_api.app.core.config``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from event_graphql_api.app.core.config import settings
from event_graphql_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Shutting down")
