"""UpdateProfile Command - only the fields provided are changed."""

from dataclasses import dataclass
from typing import Optional

from farmer_network.application.common.interfaces import Command, CommandHandler
from farmer_network.domain.entities.user import User
from farmer_network.domain.exceptions import EntityNotFoundError
from farmer_network.domain.ports.repositories import UserRepository
from farmer_network.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class UpdateProfileCommand(Command[User]):
    user_id: UserId
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    farm_type: Optional[str] = None
    crops: Optional[tuple[str, ...]] = None


class UpdateProfileHandler(CommandHandler[User]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, command: UpdateProfileCommand) -> User:
        user = await self._user_repository.get_by_id(command.user_id)
        if not user:
            raise EntityNotFoundError("User not found")

        user.update_profile(
            full_name=command.full_name,
            avatar_url=command.avatar_url,
            farm_type=command.farm_type,
            crops=list(command.crops) if command.crops is not None else None,
        )
        await self._user_repository.save(user)
        return user
