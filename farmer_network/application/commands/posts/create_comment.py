"""CreateComment Command."""

from dataclasses import dataclass

from farmer_network.application.common.interfaces import Command, CommandHandler
from farmer_network.application.queries.posts.list_comments import CommentView
from farmer_network.domain.entities.comment import Comment
from farmer_network.domain.exceptions import DomainValidationError, EntityNotFoundError
from farmer_network.domain.ports.repositories import (
    CommentRepository,
    PostRepository,
    UserRepository,
)
from farmer_network.domain.value_objects.post_id import PostId
from farmer_network.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class CreateCommentCommand(Command[CommentView]):
    post_id: PostId
    author_id: UserId
    text: str


class CreateCommentHandler(CommandHandler[CommentView]):
    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        user_repository: UserRepository,
    ):
        self._comment_repository = comment_repository
        self._post_repository = post_repository
        self._user_repository = user_repository

    async def execute(self, command: CreateCommentCommand) -> CommentView:
        if not (command.text or "").strip():
            raise DomainValidationError("Comment text is required")
        if not await self._post_repository.get_by_id(command.post_id):
            raise EntityNotFoundError(f"Post {command.post_id.value} not found")
        author = await self._user_repository.get_by_id(command.author_id)
        if not author:
            raise EntityNotFoundError("User not found")

        comment = Comment.create(command.post_id, author.id, command.text)
        await self._comment_repository.add(comment)
        return CommentView(comment=comment, author=author)
