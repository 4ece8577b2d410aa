"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
application can start against a local MongoDB instance; database
credentials and the target database name are expected to be supplied
by the environment in any real deployment.
"""

import os
from dataclasses import dataclass
from urllib.parse import quote_plus


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Event GraphQL API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # MongoDB connection.  ``mongo_url`` wins when set; otherwise the URL
    # is assembled from the individual parts below.  Set ``MONGO_SRV`` to
    # use a ``mongodb+srv://`` cluster address.
    mongo_url: str = os.getenv("MONGO_URL", "")
    mongo_user: str = os.getenv("MONGO_USER", "")
    mongo_password: str = os.getenv("MONGO_PASSWORD", "")
    mongo_host: str = os.getenv("MONGO_HOST", "localhost:27017")
    mongo_db: str = os.getenv("MONGO_DB", "events")
    mongo_srv: bool = _env_flag("MONGO_SRV", "false")

    # Identity used as the creator of new events when the request does
    # not carry an ``X-User-Id`` header.  Empty means no fallback.
    default_creator_id: str = os.getenv("DEFAULT_CREATOR_ID", "")

    # Serve the GraphiQL IDE on ``GET /graphql``.
    graphiql: bool = _env_flag("GRAPHIQL", "true")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    @property
    def database_url(self) -> str:
        """Connection string passed to ``MongoClient``."""
        if self.mongo_url:
            return self.mongo_url
        scheme = "mongodb+srv" if self.mongo_srv else "mongodb"
        credentials = ""
        if self.mongo_user:
            credentials = f"{quote_plus(self.mongo_user)}:{quote_plus(self.mongo_password)}@"
        url = f"{scheme}://{credentials}{self.mongo_host}/{self.mongo_db}"
        if self.mongo_srv:
            url += "?retryWrites=true"
        return url


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
