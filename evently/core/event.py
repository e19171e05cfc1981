"""
Core event and match data models.
"""

from datetime import datetime

from pydantic import BaseModel

from .group import GroupUser


class MatchData(BaseModel):
    match_id: str
    event_id: str
    home_team: str
    away_team: str
    home_score: int | None = None
    away_score: int | None = None
    created_at: datetime


class EventData(BaseModel):
    event_id: str
    title: str
    starts_at: datetime | None
    created_by_user_id: str
    created_at: datetime
    members: list[GroupUser] | None = None
