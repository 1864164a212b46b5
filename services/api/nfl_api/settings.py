"""API service configuration.

All configuration lives here as a `pydantic-settings` model. Values come from
environment variables (upper-cased field names, e.g. `DATABASE_URL`,
`STORE_BACKEND`) or a local `.env` file, and are validated once at import.

The rest of the service receives a `Settings` instance explicitly
(`create_app(settings=...)`); the module-level `settings` object is only the
default used by the ASGI entrypoint.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Store
    store_backend: Literal["sql", "mongo"] = "sql"

    database_url: str = "sqlite+pysqlite:///./nfl_api.db"
    db_echo: bool = False
    sql_create_schema: bool = False

    mongo_uri: str | None = Field(default=None, repr=False)
    mongo_database: str = "nfl"

    # HTTP
    api_prefix: str = "/api"
    cors_origins: list[str] = [
        "http://localhost:3000",
        "https://nfl-stats.marioniya.space",
    ]
    static_dir: str = "public"
    host: str = "0.0.0.0"
    port: int = 3000

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    def require_mongo_uri(self) -> str:
        if not self.mongo_uri:
            raise RuntimeError("MONGO_URI is not set. Set it in the environment or .env file.")
        return self.mongo_uri


settings = Settings()
