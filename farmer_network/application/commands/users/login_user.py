"""LoginUser Command - exchange username/password for a bearer token."""

import logging
from dataclasses import dataclass

from farmer_network.application.commands.users.register_user import AuthResult
from farmer_network.application.common.interfaces import Command, CommandHandler
from farmer_network.domain.exceptions import AuthenticationError
from farmer_network.domain.ports.repositories import UserRepository
from farmer_network.infrastructure.security import PasswordHasher, TokenService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginUserCommand(Command[AuthResult]):
    username: str
    password: str


class LoginUserHandler(CommandHandler[AuthResult]):
    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ):
        self._user_repository = user_repository
        self._password_hasher = password_hasher
        self._token_service = token_service

    async def execute(self, command: LoginUserCommand) -> AuthResult:
        user = await self._user_repository.get_by_username(
            (command.username or "").strip()
        )
        # Same error for unknown user and wrong password
        if not user or not self._password_hasher.verify(
            user.password_hash, command.password or ""
        ):
            logger.info(f"[LoginUser] Rejected login for {command.username!r}")
            raise AuthenticationError()

        token = self._token_service.issue(user.id.value, user.name)
        return AuthResult(user=user, token=token)
