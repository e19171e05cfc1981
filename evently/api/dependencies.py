"""
Dependencies used by the API.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession
from structlog import get_logger
from structlog.typing import FilteringBoundLogger

from evently.config.settings import Settings
from evently.service.database import delete_event_workflow
from evently.service.delete_event import DeleteEvent


@lru_cache
def SETTINGS():
    return Settings()


DATABASE_MANAGER = SETTINGS().async_manager()


async def get_async_session():
    async with DATABASE_MANAGER.session() as session:
        async with session.begin():
            yield session


def logger():
    return get_logger()


def acting_user(x_user_id: Annotated[str, Header(min_length=1)]) -> str:
    """
    The user on whose behalf the request is made. Authentication happens
    upstream; we only receive the already-verified user ID.
    """
    return x_user_id


SettingsDependency = Annotated[Settings, Depends(SETTINGS)]
DatabaseDependency = Annotated[AsyncSession, Depends(get_async_session)]
LoggerDependency = Annotated[FilteringBoundLogger, Depends(logger)]
ActingUserDependency = Annotated[str, Depends(acting_user)]


def get_delete_event(conn: DatabaseDependency, log: LoggerDependency) -> DeleteEvent:
    return delete_event_workflow(conn=conn, log=log)


DeleteEventDependency = Annotated[DeleteEvent, Depends(get_delete_event)]
