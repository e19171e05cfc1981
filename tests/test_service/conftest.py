"""
Configuration variables and fixtures for the service layer tests.
"""

import pytest
import pytest_asyncio
import structlog

from evently.config.settings import Settings
from evently.core.group import Permission
from evently.service import events as events_service
from evently.service import groups as groups_service

OWNER_ID = "owner_user"
ADMIN_ID = "admin_user"
MEMBER_ID = "member_user"


@pytest.fixture(scope="session")
def session_manager(server_settings: Settings, database):
    yield server_settings.async_manager()


@pytest.fixture(scope="session")
def logger():
    yield structlog.get_logger()


@pytest_asyncio.fixture(loop_scope="session")
async def event(session_manager, logger):
    """
    An event owned by OWNER_ID, with an admin and a plain member.
    """
    async with session_manager.session() as conn:
        async with conn.begin():
            event = await events_service.create(
                title="Sunday five-a-side",
                starts_at=None,
                created_by_user_id=OWNER_ID,
                conn=conn,
                log=logger,
            )
            EVENT_ID = event.event_id

            await groups_service.add_member(
                event_id=EVENT_ID,
                user_id=ADMIN_ID,
                permission=Permission.ADMIN,
                conn=conn,
                log=logger,
            )
            await groups_service.add_member(
                event_id=EVENT_ID,
                user_id=MEMBER_ID,
                permission=Permission.USER,
                conn=conn,
                log=logger,
            )

    yield EVENT_ID

    async with session_manager.session() as conn:
        async with conn.begin():
            await events_service.delete(event_id=EVENT_ID, conn=conn, log=logger)
