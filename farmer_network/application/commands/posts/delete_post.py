"""DeletePost Command - authors may delete their own posts."""

import logging
from dataclasses import dataclass

from farmer_network.application.common.interfaces import Command, CommandHandler
from farmer_network.domain.exceptions import AccessDeniedError, EntityNotFoundError
from farmer_network.domain.ports.repositories import PostRepository
from farmer_network.domain.value_objects.post_id import PostId
from farmer_network.domain.value_objects.user_id import UserId
from farmer_network.infrastructure.storage import FileStorageService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeletePostCommand(Command[bool]):
    post_id: PostId
    requester_id: UserId


class DeletePostHandler(CommandHandler[bool]):
    def __init__(
        self,
        post_repository: PostRepository,
        file_storage: FileStorageService,
    ):
        self._post_repository = post_repository
        self._file_storage = file_storage

    async def execute(self, command: DeletePostCommand) -> bool:
        post = await self._post_repository.get_by_id(command.post_id)
        if not post:
            raise EntityNotFoundError(f"Post {command.post_id.value} not found")
        if not post.is_authored_by(command.requester_id):
            raise AccessDeniedError("You can only delete your own posts")

        deleted = await self._post_repository.delete(command.post_id)
        if deleted:
            for url in post.image_urls:
                self._file_storage.delete_by_url(url)
        return deleted
