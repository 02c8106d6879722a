"""
Resolvers for the user queries.

Both resolvers are total over validated input: an unknown id resolves to
``None`` and an out-of-range limit is clamped, so neither raises.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...data import user_store
from ...logging import get_logger
from ..types.user import User

if TYPE_CHECKING:
    from ...data import UserStore

logger = get_logger(__name__)

DEFAULT_LIST_LIMIT = 10


def resolve_user_by_id(
    info: strawberry.Info | None, id: str, store: UserStore | None = None
) -> User | None:
    """Return the user whose id matches exactly, or None."""
    _ = info
    if store is None:
        store = user_store

    for record in store.all_users():
        if record.id == id:
            return User.from_record(record)

    logger.debug("User not found", user_id=id)
    return None


def resolve_list_users(
    info: strawberry.Info | None, limit: int | None, store: UserStore | None = None
) -> list[User]:
    """Return the first ``limit`` users in store order.

    A missing limit falls back to DEFAULT_LIST_LIMIT; zero or negative
    limits yield an empty list.
    """
    _ = info
    if store is None:
        store = user_store

    if limit is None:
        limit = DEFAULT_LIST_LIMIT
    if limit <= 0:
        return []

    return [User.from_record(record) for record in store.all_users()[:limit]]
