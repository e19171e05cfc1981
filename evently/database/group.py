"""
Group membership ORM.
"""

from sqlmodel import Field, SQLModel

from evently.core.group import GroupUser, Permission


class GroupMembership(SQLModel, table=True):
    """
    A record of a user's membership, and permission level, in the group of
    an event.
    """

    __tablename__ = "group_membership"

    event_id: str = Field(
        primary_key=True, foreign_key="event.event_id", ondelete="CASCADE"
    )
    user_id: str = Field(primary_key=True)
    permission: Permission = Field(default=Permission.USER)

    def to_core(self) -> GroupUser:
        return GroupUser(id=self.user_id, permission=self.permission)
