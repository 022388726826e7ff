import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Eye Records API"
    app_version: str = "0.1.0"
    app_env: str = "development"

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 5001
    cors_origins: list[str] = ["*"]

    # GraphQL endpoint
    graphql_path: str = "/graphql"
    graphiql_enabled: bool = True

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_graphql: str = "WARNING"       # strawberry execution errors
    log_level_store: str = "INFO"            # record service + in-memory store

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def model_post_init(self, __context: object) -> None:
        """Normalize the GraphQL mount path to a single leading slash."""
        normalized = "/" + self.graphql_path.strip("/")
        if normalized != self.graphql_path:
            _config_logger.debug("GraphQL path %r normalized to %r", self.graphql_path, normalized)
            object.__setattr__(self, "graphql_path", normalized)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
