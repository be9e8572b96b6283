from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "CRM Backend"
    app_version: str = "0.1.0"
    app_env: str = "development"

    # HTTP listener; PORT overrides the port
    host: str = "0.0.0.0"
    port: int = 3000

    # Storage
    database_url: str = "sqlite:///./crm.db"
    database_echo: bool = False

    # All client routes are nested under this path
    resource_prefix: str = "/api/clients"

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_store: str = "INFO"            # client repository + service

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Normalise the resource prefix to a leading slash and no trailing slash."""
        prefix = "/" + self.resource_prefix.strip("/")
        object.__setattr__(self, "resource_prefix", prefix)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
