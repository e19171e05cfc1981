"""
Identifier creation. Required because uuid7 was not part of the python standard as of 3.12
"""

from uuid_extensions import uuid7


def new_id() -> str:
    """
    A new, time-ordered, opaque string identifier.
    """
    return str(uuid7())


__all__ = ["new_id"]
