"""In-memory user data store."""

from .models import UserRecord
from .seed_data import REFERENCE_USER_COUNT, build_reference_users
from .store import UserStore, user_store

__all__ = [
    "REFERENCE_USER_COUNT",
    "UserRecord",
    "UserStore",
    "build_reference_users",
    "user_store",
]
