"""
Immutable in-memory store of user records.

The store is built once at import time and never mutated afterwards, so
concurrent reads from request handlers need no locking.
"""

from collections.abc import Iterable

from ..logging import get_logger
from .models import UserRecord
from .seed_data import build_reference_users

logger = get_logger(__name__)


class UserStore:
    """Ordered, read-only collection of user records."""

    def __init__(self, users: Iterable[UserRecord] = ()) -> None:
        records = tuple(users)

        seen: set[str] = set()
        for record in records:
            if record.id in seen:
                raise ValueError(f"Duplicate user id in store: {record.id!r}")
            seen.add(record.id)

        self._users = records

    def all_users(self) -> tuple[UserRecord, ...]:
        """Return every record in insertion order."""
        return self._users

    def __len__(self) -> int:
        return len(self._users)


# Process-wide store, populated once before the server accepts traffic
user_store = UserStore(build_reference_users())
logger.debug("User store initialized", size=len(user_store))
