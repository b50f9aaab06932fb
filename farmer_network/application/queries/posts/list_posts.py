"""
ListPosts Query - the feed, newest first, optionally for one crop community.

Authors are loaded in one batch and attached to each post.
"""

from dataclasses import dataclass
from typing import Optional

from farmer_network.application.common.interfaces import Query, QueryHandler
from farmer_network.domain.entities.post import Post, normalize_community
from farmer_network.domain.entities.user import User
from farmer_network.domain.ports.repositories import PostRepository, UserRepository


@dataclass
class PostView:
    post: Post
    author: Optional[User]


@dataclass(frozen=True)
class ListPostsQuery(Query[list[PostView]]):
    community: Optional[str] = None


class ListPostsHandler(QueryHandler[list[PostView]]):
    def __init__(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
    ):
        self._post_repository = post_repository
        self._user_repository = user_repository

    async def execute(self, query: ListPostsQuery) -> list[PostView]:
        posts = await self._post_repository.list_recent(
            normalize_community(query.community)
        )
        author_ids = {p.author_id for p in posts}
        authors = {
            u.id.value: u for u in await self._user_repository.get_many_by_id(author_ids)
        }
        return [PostView(post=p, author=authors.get(p.author_id.value)) for p in posts]
