"""User queries."""

from farmer_network.application.queries.users.list_users import (
    ListUsersQuery,
    ListUsersHandler,
)
from farmer_network.application.queries.users.get_user import (
    GetUserQuery,
    GetUserHandler,
)

__all__ = [
    "ListUsersQuery",
    "ListUsersHandler",
    "GetUserQuery",
    "GetUserHandler",
]
