"""
Errors shared between the service layer and its callers.
"""


class EventNotFound(Exception):
    pass


class MatchNotFound(Exception):
    pass


class UserNotAuthorized(Exception):
    """
    The acting user is not a member of the event's group.
    """


class InsufficientPermission(UserNotAuthorized):
    """
    The acting user is a member of the event's group, but only holds
    the unprivileged `user` permission.
    """
