"""UnfollowUser Command - removes the edge from both sides, idempotently."""

from dataclasses import dataclass

from farmer_network.application.common.interfaces import Command, CommandHandler
from farmer_network.domain.entities.user import User
from farmer_network.domain.exceptions import EntityNotFoundError
from farmer_network.domain.ports.repositories import UserRepository


@dataclass(frozen=True)
class UnfollowUserCommand(Command[User]):
    follower: str
    target: str


class UnfollowUserHandler(CommandHandler[User]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, command: UnfollowUserCommand) -> User:
        follower = await self._user_repository.get_by_username(command.follower)
        if not follower:
            raise EntityNotFoundError("User not found")
        target = await self._user_repository.get_by_username(command.target)
        if not target:
            raise EntityNotFoundError(f"User {command.target} not found")

        follower.unfollow(target)
        await self._user_repository.remove_follow_edge(follower.name, target.name)
        return follower
