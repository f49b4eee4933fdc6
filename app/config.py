# app/config.py
"""
Environment-driven settings.

Every value comes from the process environment (or a local .env file).
Missing or malformed values fail at startup, when get_settings() is first
called, never while serving a request.
"""

from functools import lru_cache
from typing import Optional, Union

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

DB_FIELDS = ("db_host", "db_port", "db_name", "db_user", "db_password", "db_max_connections")

DEFAULT_POOL_SIZE = 5


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # HTTP server
    port: int
    threads: int = 16
    idle_connection_timeout: int = 10

    # Store; DATABASE_URL takes precedence over the DB_* parts
    database_url: Optional[str] = None
    db_host: Optional[str] = None
    db_port: Optional[int] = None
    db_name: Optional[str] = None
    db_user: Optional[str] = None
    db_password: Optional[str] = None
    db_max_connections: Optional[int] = None

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    @model_validator(mode="after")
    def check_database_parts(self):
        if self.database_url:
            return self
        missing = [name.upper() for name in DB_FIELDS if getattr(self, name) is None]
        if missing:
            raise ValueError(f"missing database settings: {', '.join(missing)}")
        return self

    @property
    def store_url(self) -> Union[str, URL]:
        if self.database_url:
            return self.database_url
        return URL.create(
            "postgresql+psycopg2",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )

    @property
    def pool_size(self) -> int:
        return self.db_max_connections or DEFAULT_POOL_SIZE


@lru_cache
def get_settings() -> Settings:
    return Settings()
