"""Prisma Comment Repository Implementation."""

from prisma import Prisma
from prisma.models import Comment as PrismaComment
from farmer_network.domain.entities.comment import Comment
from farmer_network.domain.ports.repositories import CommentRepository
from farmer_network.domain.value_objects.comment_id import CommentId
from farmer_network.domain.value_objects.post_id import PostId
from farmer_network.domain.value_objects.user_id import UserId


class PrismaCommentRepository(CommentRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaComment) -> Comment:
        return Comment(
            id=CommentId(record.id),
            post_id=PostId(record.post_id),
            author_id=UserId(record.author_id),
            text=record.text,
            created_at=record.created_at,
        )

    async def list_by_post(self, post_id: PostId) -> list[Comment]:
        records = await self._prisma.comment.find_many(
            where={"post_id": post_id.value},
            order={"created_at": "asc"},
        )
        return [self._to_entity(record) for record in records]

    async def add(self, comment: Comment) -> None:
        await self._prisma.comment.create(
            data={
                "id": comment.id.value,
                "post_id": comment.post_id.value,
                "author_id": comment.author_id.value,
                "text": comment.text,
                "created_at": comment.created_at,
            }
        )
