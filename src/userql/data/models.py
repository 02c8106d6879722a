"""
User record model held by the in-memory store
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserRecord:
    """A single user row held by the store."""

    id: str
    name: str
    email: str
    age: int
