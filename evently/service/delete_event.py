"""
The delete-event workflow: check that the acting user may delete the
event, then remove the event and its matches.
"""

from structlog.typing import FilteringBoundLogger

from evently.core.errors import EventNotFound, InsufficientPermission, UserNotAuthorized

from .repositories import EventDeleter, GroupLookup, MatchDeleter


class DeleteEvent:
    """
    Authorize-then-cascade deletion of an event.

    Authorization is fully resolved before anything is deleted. The event is
    always deleted before its matches, and there is no compensation if the
    match deletion fails after the event has gone; errors from the stores
    are propagated unmodified.
    """

    group_lookup: GroupLookup
    event_deleter: EventDeleter
    match_deleter: MatchDeleter

    def __init__(
        self,
        group_lookup: GroupLookup,
        event_deleter: EventDeleter,
        match_deleter: MatchDeleter,
    ):
        self.group_lookup = group_lookup
        self.event_deleter = event_deleter
        self.match_deleter = match_deleter

    async def perform(
        self, event_id: str, user_id: str, log: FilteringBoundLogger
    ) -> None:
        """
        Delete event `event_id` on behalf of user `user_id`.

        Parameters
        ----------
        event_id: str
            The event to delete.
        user_id: str
            The user requesting the deletion.
        log: FilteringBoundLogger
            Logger instance.

        Raises
        ------
        EventNotFound
            If there is no group for the event.
        UserNotAuthorized
            If the user is not a member of the event's group.
        InsufficientPermission
            If the user is a member, but not an owner or admin.
        """
        log = log.bind(event_id=event_id, user_id=user_id)

        group = await self.group_lookup.load(event_id)

        if group is None:
            await log.ainfo("event.delete.not_found")
            raise EventNotFound(f"Event {event_id} not found")

        member = group.find_user(user_id)

        if member is None:
            await log.awarning("event.delete.not_member")
            raise UserNotAuthorized(
                f"User {user_id} is not a member of event {event_id}"
            )

        log = log.bind(permission=member.permission.value)

        if not member.is_elevated():
            await log.awarning("event.delete.insufficient_permission")
            raise InsufficientPermission(
                f"User {user_id} does not have permission to delete event {event_id}"
            )

        await self.event_deleter.delete(event_id)
        await log.adebug("event.delete.event_removed")

        await self.match_deleter.delete(event_id)
        await log.ainfo("event.deleted")
