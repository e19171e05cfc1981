"""
Meta functionality for the database.
"""

from .event import Event
from .group import GroupMembership
from .match import Match

ALL_TABLES = (
    Event,
    GroupMembership,
    Match,
)
