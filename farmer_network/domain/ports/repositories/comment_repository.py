"""
Comment Repository Port - Interface for comment persistence.
Implementation: farmer_network/infrastructure/persistence/prisma_comment_repository.py
"""

from abc import ABC, abstractmethod

from farmer_network.domain.entities.comment import Comment
from farmer_network.domain.value_objects.post_id import PostId


class CommentRepository(ABC):
    @abstractmethod
    async def list_by_post(self, post_id: PostId) -> list[Comment]:
        """Oldest first."""
        ...

    @abstractmethod
    async def add(self, comment: Comment) -> None: ...
