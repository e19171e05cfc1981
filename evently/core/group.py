"""
Core group data models. A group is the set of users, with their permission
levels, attached to an event.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Permission(str, Enum):
    OWNER = "owner"
    ADMIN = "admin"
    USER = "user"


class GroupUser(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    permission: Permission

    def is_elevated(self) -> bool:
        """
        Whether this member may perform privileged actions (e.g. deleting
        the event). Only plain users are unprivileged.
        """
        return self.permission != Permission.USER


class Group(BaseModel):
    model_config = ConfigDict(frozen=True)

    users: frozenset[GroupUser] = frozenset()

    def find_user(self, user_id: str) -> GroupUser | None:
        """
        Find the member with id `user_id`, returning None if they are not
        part of this group.
        """
        for user in self.users:
            if user.id == user_id:
                return user

        return None
