"""
Event management.
"""

from datetime import datetime

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from evently.api.dependencies import (
    ActingUserDependency,
    DatabaseDependency,
    DeleteEventDependency,
    LoggerDependency,
)
from evently.core.event import EventData, MatchData
from evently.core.group import Group, GroupUser, Permission
from evently.service import events as events_service
from evently.service import groups as groups_service
from evently.service import matches as matches_service

event_app = APIRouter(tags=["Event Management"])


def require_member(group: Group | None, user_id: str, elevated: bool) -> GroupUser:
    """
    Boundary-level access check for the non-delete endpoints. Missing events,
    and events the user cannot see, are both reported as 404.
    """
    member = group.find_user(user_id) if group is not None else None

    if member is None:
        raise HTTPException(status_code=404, detail="Event not found")

    if elevated and not member.is_elevated():
        raise HTTPException(
            status_code=403, detail="Owner or admin permission required"
        )

    return member


@event_app.get(
    "/list",
    summary="List events",
    description="Retrieve a list of all events that the user is a member of.",
    responses={
        200: {"description": "List of events."},
    },
)
async def list_events(
    user_id: ActingUserDependency,
    conn: DatabaseDependency,
    log: LoggerDependency,
) -> list[EventData]:
    log = log.bind(user_id=user_id)
    events = await events_service.get_event_list(conn=conn, log=log, for_user=user_id)
    return [e.to_core() for e in events]


class EventCreationRequest(BaseModel):
    """
    Request model for creating a new event.
    """

    title: str
    starts_at: datetime | None = None


@event_app.put(
    "",
    summary="Create a new event",
    description=(
        "Create a new event. The creator is automatically added to the "
        "event's group as its owner."
    ),
    responses={
        200: {"description": "Event created successfully."},
    },
)
async def create_event(
    content: EventCreationRequest,
    user_id: ActingUserDependency,
    conn: DatabaseDependency,
    log: LoggerDependency,
) -> EventData:
    event = await events_service.create(
        title=content.title,
        starts_at=content.starts_at,
        created_by_user_id=user_id,
        conn=conn,
        log=log,
    )

    return event.to_core()


@event_app.get(
    "/{event_id}",
    summary="Get event by ID",
    description=(
        "Retrieve an event by its ID, with information about its members. "
        "Users must be a member of the event's group."
    ),
    responses={
        200: {"description": "Event details with members."},
        404: {"description": "Event not found."},
    },
)
async def get_event_by_id(
    event_id: str,
    user_id: ActingUserDependency,
    conn: DatabaseDependency,
    log: LoggerDependency,
) -> EventData:
    log = log.bind(event_id=event_id, user_id=user_id)
    group = await groups_service.read_for_event(event_id=event_id, conn=conn, log=log)
    require_member(group, user_id, elevated=False)

    event = await events_service.read_by_id(event_id=event_id, conn=conn, log=log)
    data = event.to_core()
    data.members = sorted(group.users, key=lambda x: x.id)

    return data


@event_app.delete(
    "/{event_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an event",
    description=(
        "Delete an event, and all of its matches. "
        "Only owners and admins of the event can delete it."
    ),
    responses={
        204: {"description": "Event deleted successfully."},
        403: {"description": "Access denied to delete this event."},
        404: {"description": "Event not found."},
    },
)
async def delete_event(
    event_id: str,
    user_id: ActingUserDependency,
    workflow: DeleteEventDependency,
    log: LoggerDependency,
) -> None:
    await workflow.perform(event_id=event_id, user_id=user_id, log=log)
    return None


class ChangeEventMembersRequest(BaseModel):
    """
    Request model for adding (or changing the permission of) or removing
    members of an event's group.
    """

    add_user_id: str | None = None
    permission: Permission = Permission.USER
    remove_user_id: str | None = None


@event_app.post(
    "/{event_id}/members",
    summary="Add or remove a member of an event",
    description=(
        "Add a user to, or remove a user from, the group of an event. "
        "Only owners and admins of the event can change its members, and "
        "only owners can grant, change, or revoke the owner permission."
    ),
    responses={
        200: {"description": "Members changed successfully."},
        400: {"description": "No action specified."},
        403: {"description": "Access denied to change members of this event."},
        404: {"description": "Event not found."},
    },
)
async def change_event_members(
    event_id: str,
    content: ChangeEventMembersRequest,
    user_id: ActingUserDependency,
    conn: DatabaseDependency,
    log: LoggerDependency,
) -> list[GroupUser]:
    log = log.bind(
        event_id=event_id,
        user_id=user_id,
        add_user_id=content.add_user_id,
        remove_user_id=content.remove_user_id,
    )

    group = await groups_service.read_for_event(event_id=event_id, conn=conn, log=log)
    member = require_member(group, user_id, elevated=True)

    target_id = content.add_user_id or content.remove_user_id
    target = group.find_user(target_id) if target_id is not None else None

    touches_owner = (
        content.add_user_id is not None and content.permission == Permission.OWNER
    ) or (target is not None and target.permission == Permission.OWNER)

    if touches_owner and member.permission != Permission.OWNER:
        await log.awarning("event.members.change.owner_access_denied")
        raise HTTPException(
            status_code=403, detail="Only owners can grant or revoke ownership"
        )

    if content.add_user_id is not None:
        await groups_service.add_member(
            event_id=event_id,
            user_id=content.add_user_id,
            permission=content.permission,
            conn=conn,
            log=log,
        )
    elif content.remove_user_id is not None:
        await groups_service.remove_member(
            event_id=event_id,
            user_id=content.remove_user_id,
            conn=conn,
            log=log,
        )
    else:
        await log.awarning("event.members.change.no_action")
        raise HTTPException(
            status_code=400, detail="No action specified for member change"
        )

    group = await groups_service.read_for_event(event_id=event_id, conn=conn, log=log)
    return sorted(group.users, key=lambda x: x.id)


class MatchCreationRequest(BaseModel):
    home_team: str
    away_team: str


@event_app.put(
    "/{event_id}/matches",
    summary="Add a match to an event",
    description="Only owners and admins of the event can add matches.",
    responses={
        200: {"description": "Match created successfully."},
        403: {"description": "Access denied to add matches to this event."},
        404: {"description": "Event not found."},
    },
)
async def create_match(
    event_id: str,
    content: MatchCreationRequest,
    user_id: ActingUserDependency,
    conn: DatabaseDependency,
    log: LoggerDependency,
) -> MatchData:
    log = log.bind(event_id=event_id, user_id=user_id)
    group = await groups_service.read_for_event(event_id=event_id, conn=conn, log=log)
    require_member(group, user_id, elevated=True)

    match = await matches_service.create(
        event_id=event_id,
        home_team=content.home_team,
        away_team=content.away_team,
        conn=conn,
        log=log,
    )

    return match.to_core()


@event_app.get(
    "/{event_id}/matches",
    summary="List the matches of an event",
    responses={
        200: {"description": "List of matches."},
        404: {"description": "Event not found."},
    },
)
async def list_matches(
    event_id: str,
    user_id: ActingUserDependency,
    conn: DatabaseDependency,
    log: LoggerDependency,
) -> list[MatchData]:
    log = log.bind(event_id=event_id, user_id=user_id)
    group = await groups_service.read_for_event(event_id=event_id, conn=conn, log=log)
    require_member(group, user_id, elevated=False)

    matches = await matches_service.get_match_list(event_id=event_id, conn=conn, log=log)
    return [m.to_core() for m in matches]


@event_app.get(
    "/{event_id}/matches/{match_id}",
    summary="Get a match of an event",
    responses={
        200: {"description": "Match details."},
        404: {"description": "Event or match not found."},
    },
)
async def get_match_by_id(
    event_id: str,
    match_id: str,
    user_id: ActingUserDependency,
    conn: DatabaseDependency,
    log: LoggerDependency,
) -> MatchData:
    log = log.bind(event_id=event_id, user_id=user_id)
    group = await groups_service.read_for_event(event_id=event_id, conn=conn, log=log)
    require_member(group, user_id, elevated=False)

    match = await matches_service.read_by_id(
        match_id=match_id, conn=conn, log=log, event_id=event_id
    )
    return match.to_core()
