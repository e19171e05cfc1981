"""
Main settings object.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy import URL

from .managers import AsyncSessionManager, SyncSessionManager

DRIVERS = {
    "sqlite": ("sqlite", "sqlite+aiosqlite"),
    "postgres": ("postgresql+psycopg", "postgresql+asyncpg"),
}


class Settings(BaseSettings):
    database_type: Literal["sqlite", "postgres"] = "sqlite"
    database_user: str | None = None
    database_password: str | None = None
    database_port: int | None = None
    database_host: str | None = None
    database_db: str = "evently.db"

    database_echo: bool = False

    # Create the table schema when the API starts. Production databases
    # should be set up with `evently setup` instead.
    create_tables: bool = False

    # Where `evently run` serves the API.
    server_host: str = "0.0.0.0"
    server_port: int = 8000

    model_config = SettingsConfigDict(env_prefix="EVENTLY_", env_file=".env")

    def database_uri(self, asynchronous: bool) -> URL:
        sync_driver, async_driver = DRIVERS[self.database_type]

        return URL.create(
            drivername=async_driver if asynchronous else sync_driver,
            username=self.database_user,
            password=self.database_password,
            host=self.database_host,
            port=self.database_port,
            database=self.database_db,
        )

    def sync_manager(self) -> SyncSessionManager:
        return SyncSessionManager(
            connection_url=self.database_uri(asynchronous=False),
            echo=self.database_echo,
        )

    def async_manager(self) -> AsyncSessionManager:
        return AsyncSessionManager(
            connection_url=self.database_uri(asynchronous=True),
            echo=self.database_echo,
        )
