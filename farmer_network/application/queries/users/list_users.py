"""List Users Query - newest accounts first."""

from dataclasses import dataclass

from farmer_network.application.common.interfaces import Query, QueryHandler
from farmer_network.domain.entities.user import User
from farmer_network.domain.ports.repositories import UserRepository


@dataclass(frozen=True)
class ListUsersQuery(Query[list[User]]):
    pass


class ListUsersHandler(QueryHandler[list[User]]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, query: ListUsersQuery) -> list[User]:
        return await self._user_repository.list_all()
