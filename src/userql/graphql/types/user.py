"""
User GraphQL type definitions
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ...data import UserRecord


@strawberry.type
class User:
    """User type for GraphQL API."""

    id: strawberry.ID
    name: str
    email: str
    age: int

    @classmethod
    def from_record(cls, record: UserRecord) -> User:
        """Convert a store record to the GraphQL type."""
        return cls(
            id=strawberry.ID(record.id),
            name=record.name,
            email=record.email,
            age=record.age,
        )
