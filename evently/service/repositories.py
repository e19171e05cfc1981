"""
Interfaces for the stores that the event workflows depend on. Anything
with matching (async) methods can be used; see `service.database` for the
implementations backed by our own tables.
"""

from typing import Protocol, runtime_checkable

from evently.core.group import Group


@runtime_checkable
class GroupLookup(Protocol):
    async def load(self, event_id: str) -> Group | None:
        """
        Return the current group for the event, or None if the event does
        not exist. Only raises for storage failures.
        """
        ...


@runtime_checkable
class EventDeleter(Protocol):
    async def delete(self, event_id: str) -> None:
        """
        Delete the event record.
        """
        ...


@runtime_checkable
class MatchDeleter(Protocol):
    async def delete(self, event_id: str) -> None:
        """
        Delete all matches that belong to the event. Having no matches is
        not an error.
        """
        ...
