"""Get User Query - by username, or by id when `user_id` is given."""

from dataclasses import dataclass
from typing import Optional

from farmer_network.application.common.interfaces import Query, QueryHandler
from farmer_network.domain.entities.user import User
from farmer_network.domain.exceptions import EntityNotFoundError
from farmer_network.domain.ports.repositories import UserRepository
from farmer_network.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class GetUserQuery(Query[User]):
    username: Optional[str] = None
    user_id: Optional[UserId] = None


class GetUserHandler(QueryHandler[User]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, query: GetUserQuery) -> User:
        user = None
        if query.user_id is not None:
            user = await self._user_repository.get_by_id(query.user_id)
        elif query.username:
            user = await self._user_repository.get_by_username(query.username)
        if not user:
            raise EntityNotFoundError("User not found")
        return user
