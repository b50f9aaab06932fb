"""
Post Repository Port - Interface for post persistence.
Implementation: farmer_network/infrastructure/persistence/prisma_post_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from farmer_network.domain.entities.post import Post
from farmer_network.domain.value_objects.post_id import PostId


class PostRepository(ABC):
    @abstractmethod
    async def get_by_id(self, post_id: PostId) -> Optional[Post]: ...

    @abstractmethod
    async def list_recent(self, community: Optional[str] = None) -> list[Post]:
        """Newest first, optionally limited to one crop community."""
        ...

    @abstractmethod
    async def add(self, post: Post) -> None: ...

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool: ...
