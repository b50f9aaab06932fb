"""ListComments Query - comments under a post, oldest first."""

from dataclasses import dataclass
from typing import Optional

from farmer_network.application.common.interfaces import Query, QueryHandler
from farmer_network.domain.entities.comment import Comment
from farmer_network.domain.entities.user import User
from farmer_network.domain.exceptions import EntityNotFoundError
from farmer_network.domain.ports.repositories import (
    CommentRepository,
    PostRepository,
    UserRepository,
)
from farmer_network.domain.value_objects.post_id import PostId


@dataclass
class CommentView:
    comment: Comment
    author: Optional[User]


@dataclass(frozen=True)
class ListCommentsQuery(Query[list[CommentView]]):
    post_id: PostId


class ListCommentsHandler(QueryHandler[list[CommentView]]):
    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        user_repository: UserRepository,
    ):
        self._comment_repository = comment_repository
        self._post_repository = post_repository
        self._user_repository = user_repository

    async def execute(self, query: ListCommentsQuery) -> list[CommentView]:
        if not await self._post_repository.get_by_id(query.post_id):
            raise EntityNotFoundError(f"Post {query.post_id.value} not found")

        comments = await self._comment_repository.list_by_post(query.post_id)
        authors = {
            u.id.value: u
            for u in await self._user_repository.get_many_by_id(
                {c.author_id for c in comments}
            )
        }
        return [
            CommentView(comment=c, author=authors.get(c.author_id.value))
            for c in comments
        ]
