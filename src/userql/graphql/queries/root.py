"""
Root GraphQL query definitions
"""

import strawberry

from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    def get_user(self, info: strawberry.Info, id: strawberry.ID) -> User | None:
        """Get a user by ID."""
        from ..resolvers.user import resolve_user_by_id

        return resolve_user_by_id(info, str(id))

    @strawberry.field
    def list_users(
        self, info: strawberry.Info, limit: int | None = strawberry.UNSET
    ) -> list[User]:
        """List users in store order, up to ``limit``."""
        from ..resolvers.user import resolve_list_users

        # No schema default: an omitted argument arrives as UNSET
        return resolve_list_users(info, None if limit is strawberry.UNSET else limit)
