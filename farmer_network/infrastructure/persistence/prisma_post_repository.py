"""Prisma Post Repository Implementation."""

from typing import Optional
from prisma import Prisma
from prisma.errors import RecordNotFoundError
from prisma.models import Post as PrismaPost
from farmer_network.domain.entities.post import Post
from farmer_network.domain.ports.repositories import PostRepository
from farmer_network.domain.value_objects.post_id import PostId
from farmer_network.domain.value_objects.user_id import UserId


class PrismaPostRepository(PostRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaPost) -> Post:
        return Post(
            id=PostId(record.id),
            author_id=UserId(record.author_id),
            text=record.text,
            created_at=record.created_at,
            updated_at=record.updated_at,
            image_urls=list(record.image_urls or []),
            location=record.location,
            community=record.community,
        )

    async def get_by_id(self, post_id: PostId) -> Optional[Post]:
        record = await self._prisma.post.find_unique(where={"id": post_id.value})
        return self._to_entity(record) if record else None

    async def list_recent(self, community: Optional[str] = None) -> list[Post]:
        where = {"community": community} if community else {}
        records = await self._prisma.post.find_many(
            where=where,
            order={"created_at": "desc"},
        )
        return [self._to_entity(record) for record in records]

    async def add(self, post: Post) -> None:
        await self._prisma.post.create(
            data={
                "id": post.id.value,
                "author_id": post.author_id.value,
                "text": post.text,
                "image_urls": list(post.image_urls),
                "location": post.location,
                "community": post.community,
                "created_at": post.created_at,
                "updated_at": post.updated_at,
            }
        )

    async def delete(self, post_id: PostId) -> bool:
        """Delete post (comments cascade). Returns False if it was already gone."""
        try:
            await self._prisma.post.delete(where={"id": post_id.value})
            return True
        except RecordNotFoundError:
            return False
