"""
Service layer for events.
"""

from datetime import datetime, timezone

from sqlalchemy import delete as sql_delete
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from structlog.typing import FilteringBoundLogger

from evently.core.errors import EventNotFound
from evently.core.group import Permission
from evently.database.event import Event
from evently.database.group import GroupMembership


async def create(
    title: str,
    starts_at: datetime | None,
    created_by_user_id: str,
    conn: AsyncSession,
    log: FilteringBoundLogger,
) -> Event:
    """
    Create a new event. The creating user becomes the owner of the event's
    group.

    Parameters
    ----------
    title: str
        Title of the event.
    starts_at: datetime | None
        When the event starts, if known.
    created_by_user_id: str
        The user that created, and owns, this event.
    conn: AsyncSession
        The database session.
    log: FilteringBoundLogger
        Logger instance.
    """
    title = title.strip()

    log = log.bind(title=title, user_id=created_by_user_id)

    event = Event(
        title=title,
        starts_at=starts_at,
        created_by_user_id=created_by_user_id,
        created_at=datetime.now(tz=timezone.utc),
    )

    owner = GroupMembership(
        event_id=event.event_id,
        user_id=created_by_user_id,
        permission=Permission.OWNER,
    )

    conn.add(event)
    await conn.flush()
    conn.add(owner)
    await conn.flush()

    await log.ainfo("event.created", event_id=event.event_id)

    return event


async def read_by_id(
    event_id: str,
    conn: AsyncSession,
    log: FilteringBoundLogger,
) -> Event:
    """
    Read an event by its ID.

    Raises
    ------
    EventNotFound
        If the event does not exist.
    """
    log = log.bind(event_id=event_id)
    event = await conn.get(Event, event_id)

    if event is None:
        await log.ainfo("event.not_found")
        raise EventNotFound(f"Event with id {event_id} not found")

    await log.adebug("event.found")
    return event


async def get_event_list(
    conn: AsyncSession,
    log: FilteringBoundLogger,
    for_user: str | None = None,
) -> list[Event]:
    """
    Get a list of events, either all of them (for_user = None) or only
    those whose group contains the user `for_user`.
    """
    log = log.bind(for_user=for_user)

    query = select(Event)

    if for_user is not None:
        query = query.join(
            GroupMembership, GroupMembership.event_id == Event.event_id
        ).where(GroupMembership.user_id == for_user)

    result = await conn.execute(query.order_by(Event.created_at))
    events = list(result.scalars().all())

    await log.adebug("event.listed", number_of_events=len(events))
    return events


async def delete(
    event_id: str,
    conn: AsyncSession,
    log: FilteringBoundLogger,
) -> None:
    """
    Delete an event by its ID, along with its group. Deleting an event that
    does not exist is not an error. Matches are not touched; see
    `matches.delete_for_event`.
    """
    log = log.bind(event_id=event_id)

    # SQLite does not enforce the foreign key cascade by default.
    result = await conn.execute(
        sql_delete(GroupMembership).where(GroupMembership.event_id == event_id)
    )
    await conn.execute(sql_delete(Event).where(Event.event_id == event_id))

    await log.ainfo("event.record_deleted", number_of_members=result.rowcount)
