"""
FollowUser Command.

Both sides change together in one store operation: the follower's `following`
set and the target's `followers` set. Following someone twice is a no-op.
"""

from dataclasses import dataclass

from farmer_network.application.common.interfaces import Command, CommandHandler
from farmer_network.domain.entities.user import User
from farmer_network.domain.exceptions import DomainValidationError, EntityNotFoundError
from farmer_network.domain.ports.repositories import UserRepository


@dataclass(frozen=True)
class FollowUserCommand(Command[User]):
    follower: str
    target: str


class FollowUserHandler(CommandHandler[User]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, command: FollowUserCommand) -> User:
        if command.follower == command.target:
            raise DomainValidationError("You cannot follow yourself")

        follower = await self._user_repository.get_by_username(command.follower)
        if not follower:
            raise EntityNotFoundError("User not found")
        target = await self._user_repository.get_by_username(command.target)
        if not target:
            raise EntityNotFoundError(f"User {command.target} not found")

        follower.follow(target)
        await self._user_repository.add_follow_edge(follower.name, target.name)
        return follower
