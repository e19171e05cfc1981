"""
Service layer for matches played at an event.
"""

from datetime import datetime, timezone

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from structlog.typing import FilteringBoundLogger

from evently.core.errors import MatchNotFound
from evently.database.match import Match

from . import events as events_service


async def create(
    event_id: str,
    home_team: str,
    away_team: str,
    conn: AsyncSession,
    log: FilteringBoundLogger,
) -> Match:
    """
    Create a new match for an event.

    Raises
    ------
    EventNotFound
        If the event does not exist.
    """
    log = log.bind(event_id=event_id, home_team=home_team, away_team=away_team)

    await events_service.read_by_id(event_id=event_id, conn=conn, log=log)

    match = Match(
        event_id=event_id,
        home_team=home_team.strip(),
        away_team=away_team.strip(),
        created_at=datetime.now(tz=timezone.utc),
    )

    conn.add(match)
    await conn.flush()

    await log.ainfo("match.created", match_id=match.match_id)

    return match


async def read_by_id(
    match_id: str,
    conn: AsyncSession,
    log: FilteringBoundLogger,
    event_id: str | None = None,
) -> Match:
    """
    Read a match by its ID. If `event_id` is given, the match must also
    belong to that event.

    Raises
    ------
    MatchNotFound
        If the match does not exist, or belongs to a different event.
    """
    log = log.bind(match_id=match_id, event_id=event_id)
    match = await conn.get(Match, match_id)

    if match is None or (event_id is not None and match.event_id != event_id):
        await log.ainfo("match.not_found")
        raise MatchNotFound(f"Match with id {match_id} not found")

    return match


async def get_match_list(
    event_id: str,
    conn: AsyncSession,
    log: FilteringBoundLogger,
) -> list[Match]:
    """
    Get all matches for an event, oldest first.
    """
    log = log.bind(event_id=event_id)
    result = await conn.execute(
        select(Match).where(Match.event_id == event_id).order_by(Match.created_at)
    )
    matches = list(result.scalars().all())
    await log.adebug("match.listed", number_of_matches=len(matches))
    return matches


async def delete_for_event(
    event_id: str,
    conn: AsyncSession,
    log: FilteringBoundLogger,
) -> int:
    """
    Delete every match belonging to an event, returning the number of
    matches removed (which may be zero).
    """
    log = log.bind(event_id=event_id)
    result = await conn.execute(delete(Match).where(Match.event_id == event_id))
    await log.ainfo("match.deleted_for_event", number_of_matches=result.rowcount)
    return result.rowcount
