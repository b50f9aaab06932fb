"""
User Repository Port - Interface for user persistence.
Implementation: farmer_network/infrastructure/persistence/prisma_user_repository.py
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional
from farmer_network.domain.entities.user import User
from farmer_network.domain.value_objects.user_id import UserId


class UserRepository(ABC):
    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]: ...

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]: ...

    @abstractmethod
    async def get_many_by_username(self, usernames: Iterable[str]) -> list[User]: ...

    @abstractmethod
    async def get_many_by_id(self, user_ids: Iterable[UserId]) -> list[User]: ...

    @abstractmethod
    async def list_all(self) -> list[User]:
        """Newest accounts first."""
        ...

    @abstractmethod
    async def add(self, user: User) -> None: ...

    @abstractmethod
    async def save(self, user: User) -> None: ...

    @abstractmethod
    async def add_follow_edge(self, follower: str, target: str) -> None:
        """
        Add `target` to the follower's `following` and `follower` to the
        target's `followers`. Touches nothing else; adding twice is a no-op.
        """
        ...

    @abstractmethod
    async def remove_follow_edge(self, follower: str, target: str) -> None:
        """Inverse of add_follow_edge; removing a missing edge is a no-op."""
        ...
