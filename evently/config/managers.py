"""
Database engines and sessions.
"""

from sqlalchemy import URL
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlmodel import SQLModel, create_engine

# Registers all tables on the SQLModel metadata.
from evently.database.meta import ALL_TABLES  # noqa: F401


class SyncSessionManager:
    """
    Synchronous engine, used to set up (and, in tests, tear down) the
    table schema.
    """

    def __init__(self, connection_url: URL, echo: bool = False):
        self.engine = create_engine(connection_url, echo=echo)

    def create_all(self):
        with self.engine.begin() as conn:
            SQLModel.metadata.create_all(conn)

    def drop_all(self):
        """
        WARNING: this deletes all data in your database; you probably don't
        want to do this unless you are writing a test.
        """
        with self.engine.begin() as conn:
            SQLModel.metadata.drop_all(conn)


class AsyncSessionManager:
    """
    A manager for asynchronous sessions. Expected usage:

    manager = AsyncSessionManager(conn_url)

    async with manager.session() as conn:
        async with conn.begin():
            event = await events_service.read_by_id(event_id, conn=conn, log=log)
    """

    def __init__(self, connection_url: URL, echo: bool = False):
        self.engine = create_async_engine(connection_url, echo=echo)
        self.session = async_sessionmaker(self.engine, expire_on_commit=False)

    async def create_all(self):
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
