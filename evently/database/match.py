"""
Match ORM
"""

from datetime import datetime

from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel

from evently.core.event import MatchData
from evently.core.uuid import new_id


class Match(SQLModel, table=True):
    __tablename__ = "match"

    match_id: str = Field(primary_key=True, default_factory=new_id)

    # Not a foreign key: matches are removed explicitly when their event is
    # deleted, never by the database.
    event_id: str = Field(index=True)

    home_team: str
    away_team: str
    home_score: int | None = None
    away_score: int | None = None

    created_at: datetime = Field(sa_column=Column(DateTime(timezone=True)))

    def to_core(self) -> MatchData:
        return MatchData(
            match_id=self.match_id,
            event_id=self.event_id,
            home_team=self.home_team,
            away_team=self.away_team,
            home_score=self.home_score,
            away_score=self.away_score,
            created_at=self.created_at,
        )
