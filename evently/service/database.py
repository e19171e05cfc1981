"""
Database-backed implementations of the stores used by the event workflows.
Each binds the session and logger for the current request.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from structlog.typing import FilteringBoundLogger

from evently.core.group import Group

from . import events as events_service
from . import groups as groups_service
from . import matches as matches_service
from .delete_event import DeleteEvent


class DatabaseGroupLookup:
    def __init__(self, conn: AsyncSession, log: FilteringBoundLogger):
        self.conn = conn
        self.log = log

    async def load(self, event_id: str) -> Group | None:
        return await groups_service.read_for_event(
            event_id=event_id, conn=self.conn, log=self.log
        )


class DatabaseEventDeleter:
    def __init__(self, conn: AsyncSession, log: FilteringBoundLogger):
        self.conn = conn
        self.log = log

    async def delete(self, event_id: str) -> None:
        await events_service.delete(event_id=event_id, conn=self.conn, log=self.log)


class DatabaseMatchDeleter:
    def __init__(self, conn: AsyncSession, log: FilteringBoundLogger):
        self.conn = conn
        self.log = log

    async def delete(self, event_id: str) -> None:
        await matches_service.delete_for_event(
            event_id=event_id, conn=self.conn, log=self.log
        )


def delete_event_workflow(conn: AsyncSession, log: FilteringBoundLogger) -> DeleteEvent:
    """
    Build the delete-event workflow on top of our own tables.
    """
    return DeleteEvent(
        group_lookup=DatabaseGroupLookup(conn=conn, log=log),
        event_deleter=DatabaseEventDeleter(conn=conn, log=log),
        match_deleter=DatabaseMatchDeleter(conn=conn, log=log),
    )
