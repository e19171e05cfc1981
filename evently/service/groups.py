"""
Service layer for event groups: the users attached to an event, and their
permissions.
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from structlog.typing import FilteringBoundLogger

from evently.core.group import Group, Permission
from evently.database.event import Event
from evently.database.group import GroupMembership

from . import events as events_service


async def read_for_event(
    event_id: str,
    conn: AsyncSession,
    log: FilteringBoundLogger,
) -> Group | None:
    """
    Read the group for an event.

    Parameters
    ----------
    event_id: str
        The ID of the event.
    conn: AsyncSession
        The database session.
    log: FilteringBoundLogger
        Logger instance.

    Returns
    -------
    Group | None
        The current members of the event, or None if the event does not
        exist. An event without members gives an empty group.
    """
    log = log.bind(event_id=event_id)

    if await conn.get(Event, event_id) is None:
        await log.ainfo("group.event_not_found")
        return None

    result = await conn.execute(
        select(GroupMembership).where(GroupMembership.event_id == event_id)
    )
    memberships = result.scalars().all()

    await log.adebug("group.found", number_of_members=len(memberships))

    return Group(users=frozenset(m.to_core() for m in memberships))


async def add_member(
    event_id: str,
    user_id: str,
    permission: Permission,
    conn: AsyncSession,
    log: FilteringBoundLogger,
) -> GroupMembership:
    """
    Add a user to the group of an event. If they are already a member, their
    permission is updated instead.

    Raises
    ------
    EventNotFound
        If the event does not exist.
    """
    log = log.bind(event_id=event_id, user_id=user_id, permission=permission.value)

    await events_service.read_by_id(event_id=event_id, conn=conn, log=log)

    membership = await conn.get(GroupMembership, (event_id, user_id))

    if membership is None:
        membership = GroupMembership(
            event_id=event_id, user_id=user_id, permission=permission
        )
        await log.ainfo("group.user_added")
    else:
        membership.permission = permission
        await log.ainfo("group.user_permission_changed")

    conn.add(membership)
    await conn.flush()

    return membership


async def remove_member(
    event_id: str,
    user_id: str,
    conn: AsyncSession,
    log: FilteringBoundLogger,
) -> None:
    """
    Remove a user from the group of an event. Removing a user that is not
    a member does nothing.
    """
    log = log.bind(event_id=event_id, user_id=user_id)
    result = await conn.execute(
        delete(GroupMembership)
        .where(GroupMembership.event_id == event_id)
        .where(GroupMembership.user_id == user_id)
    )

    if result.rowcount:
        await log.ainfo("group.user_removed")
    else:
        await log.ainfo("group.user_not_member")
