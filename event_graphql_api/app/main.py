"""
Main entrypoint for the Event GraphQL API.

This module assembles the FastAPI application: logging, the CORS
middleware, the GraphQL router under ``/graphql`` and the exception
handlers that turn every failure into the JSON error envelope
``{"error": {"message": ..., "id": <status>}}``.  The app is
instantiated at import time as ``app``, e.g.::

    uvicorn event_graphql_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.database import Database
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import Settings, settings
from .core.db import get_client, get_database, init_db
from .core.errors import ApiError, error_envelope
from .core.logging_config import setup_logging
from .graphql.router import build_graphql_router


logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Not Found!"
ALLOWED_HEADERS = "Origin, X-Requested-With, Content-Type, Accept, Authorization, X-User-Id"
ALLOWED_METHODS = "PUT, POST, PATCH, DELETE, GET"


async def cors_middleware(request: Request, call_next):
    """Allow every origin and answer preflight requests before routing."""
    if request.method == "OPTIONS":
        response = JSONResponse({}, status_code=200)
        response.headers["Access-Control-Allow-Methods"] = ALLOWED_METHODS
    else:
        response = await call_next(request)
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = ALLOWED_HEADERS
    return response


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        if exc.status >= 500:
            logger.error("Request to %s failed: %s", request.url.path, exc.message)
        return JSONResponse(exc.to_envelope(), status_code=exc.status)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        message = NOT_FOUND_MESSAGE if exc.status_code == 404 else str(exc.detail)
        return JSONResponse(
            error_envelope(message, exc.status_code),
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(error_envelope(str(exc), 400), status_code=400)


def create_app(database: Optional[Database] = None, config: Settings = settings) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    database : Optional[Database]
        Database handle to serve from.  When omitted, a ``MongoClient``
        is opened from ``config`` at start-up and closed at shutdown.
    config : Settings
        Application settings.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(config.log_level, config.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client = None
        if getattr(app.state, "database", None) is None:
            client = get_client(config)
            app.state.database = get_database(client, config)
            init_db(app.state.database)
        try:
            yield
        finally:
            if client is not None:
                client.close()
                app.state.database = None

    app = FastAPI(title=config.project_name, version=config.api_version, debug=config.debug, lifespan=lifespan)

    app.state.settings = config
    if database is not None:
        init_db(database)
        app.state.database = database

    app.middleware("http")(cors_middleware)
    app.include_router(build_graphql_router(graphiql=config.graphiql), prefix="/graphql")
    register_error_handlers(app)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
