"""
RegisterUser Command - create an account and hand back a bearer token.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from farmer_network.application.common.interfaces import Command, CommandHandler
from farmer_network.domain.entities.user import User
from farmer_network.domain.exceptions import DomainValidationError
from farmer_network.domain.ports.repositories import UserRepository
from farmer_network.domain.value_objects.username import Username
from farmer_network.infrastructure.security import PasswordHasher, TokenService

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


@dataclass
class AuthResult:
    user: User
    token: str


@dataclass(frozen=True)
class RegisterUserCommand(Command[AuthResult]):
    username: str
    password: str
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    farm_type: Optional[str] = None
    crops: tuple[str, ...] = ()


class RegisterUserHandler(CommandHandler[AuthResult]):
    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ):
        self._user_repository = user_repository
        self._password_hasher = password_hasher
        self._token_service = token_service

    async def execute(self, command: RegisterUserCommand) -> AuthResult:
        try:
            username = Username((command.username or "").strip())
        except ValueError as e:
            raise DomainValidationError(str(e)) from e

        if len(command.password or "") < MIN_PASSWORD_LENGTH:
            raise DomainValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )

        if await self._user_repository.get_by_username(username.value):
            raise DomainValidationError("Username already taken")

        user = User.register(
            username=username,
            password_hash=self._password_hasher.hash(command.password),
            full_name=command.full_name,
            avatar_url=command.avatar_url,
            farm_type=command.farm_type,
            crops=list(command.crops),
        )
        await self._user_repository.add(user)
        logger.info(f"[RegisterUser] Registered {user.name} ({user.id.value})")

        token = self._token_service.issue(user.id.value, user.name)
        return AuthResult(user=user, token=token)
