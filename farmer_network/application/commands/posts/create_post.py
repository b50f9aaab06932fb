"""
CreatePost Command.

Images are validated up front and only then written to disk, so a rejected
post leaves no stray files behind. Files already written are removed again
if the post itself cannot be stored.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from farmer_network.application.common.interfaces import Command, CommandHandler
from farmer_network.application.queries.posts.list_posts import PostView
from farmer_network.config.settings import Config
from farmer_network.domain.entities.post import Post
from farmer_network.domain.exceptions import DomainValidationError, EntityNotFoundError
from farmer_network.domain.ports.repositories import PostRepository, UserRepository
from farmer_network.domain.value_objects.user_id import UserId
from farmer_network.infrastructure.storage import FileStorageService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImageUpload:
    filename: str
    content: bytes


@dataclass(frozen=True)
class CreatePostCommand(Command[PostView]):
    author_id: UserId
    text: str
    location: Optional[str] = None
    community: Optional[str] = None
    images: tuple[ImageUpload, ...] = ()


class CreatePostHandler(CommandHandler[PostView]):
    def __init__(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
        file_storage: FileStorageService,
    ):
        self._post_repository = post_repository
        self._user_repository = user_repository
        self._file_storage = file_storage

    async def execute(self, command: CreatePostCommand) -> PostView:
        if not (command.text or "").strip():
            raise DomainValidationError("Post text is required")
        if len(command.images) > Config.MAX_POST_IMAGES:
            raise DomainValidationError(
                f"A post can have at most {Config.MAX_POST_IMAGES} images"
            )
        try:
            for image in command.images:
                self._file_storage.validate_image(image.filename, image.content)
        except ValueError as e:
            raise DomainValidationError(str(e)) from e

        author = await self._user_repository.get_by_id(command.author_id)
        if not author:
            raise EntityNotFoundError("User not found")

        image_urls: list[str] = []
        try:
            for image in command.images:
                image_urls.append(
                    self._file_storage.save_image(image.content, image.filename).url
                )
            post = Post.create(
                author_id=author.id,
                text=command.text,
                image_urls=image_urls,
                location=command.location,
                community=command.community,
            )
            await self._post_repository.add(post)
        except Exception:
            logger.error(
                f"[CreatePost] Storing post by {author.name} failed, "
                f"removing {len(image_urls)} saved image(s)"
            )
            for url in image_urls:
                self._file_storage.delete_by_url(url)
            raise

        logger.info(
            f"[CreatePost] {author.name} posted {post.id.value} with {len(image_urls)} image(s)"
        )
        return PostView(post=post, author=author)
