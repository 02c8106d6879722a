"""
Reference dataset loaded into the user store at startup.
"""

from .models import UserRecord

REFERENCE_USER_COUNT = 10
REFERENCE_USER_AGE = 28


def build_reference_users(count: int = REFERENCE_USER_COUNT) -> list[UserRecord]:
    """
    Build the synthetic users served by the API.

    Records are numbered from 1 and returned in ascending order, e.g.
    ``user-1`` / ``Michael1`` / ``michaeldouglasdev1@gmail.com``.

    Args:
        count: Number of users to generate

    Returns:
        List of user records ordered by their numeric suffix
    """
    return [
        UserRecord(
            id=f"user-{n}",
            name=f"Michael{n}",
            email=f"michaeldouglasdev{n}@gmail.com",
            age=REFERENCE_USER_AGE,
        )
        for n in range(1, count + 1)
    ]
