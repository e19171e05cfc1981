"""
Event ORM
"""

from datetime import datetime

from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel

from evently.core.event import EventData
from evently.core.uuid import new_id


class Event(SQLModel, table=True):
    __tablename__ = "event"

    event_id: str = Field(primary_key=True, default_factory=new_id)

    title: str
    starts_at: datetime | None = Field(
        sa_column=Column(DateTime(timezone=True)), default=None
    )

    created_by_user_id: str
    created_at: datetime = Field(sa_column=Column(DateTime(timezone=True)))

    def to_core(self) -> EventData:
        """
        Convert this Event ORM object to an EventData core object. Members
        are read separately, through the group service.
        """
        return EventData(
            event_id=self.event_id,
            title=self.title,
            starts_at=self.starts_at,
            created_by_user_id=self.created_by_user_id,
            created_at=self.created_at,
        )
