"""User DTOs. The password hash never leaves the domain layer."""

from datetime import datetime
from typing import Optional

from farmer_network.application.dto.base import CamelModel
from farmer_network.domain.entities.user import User


class UserDTO(CamelModel):
    id: str
    username: str
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    farm_type: Optional[str] = None
    crops: list[str] = []
    following: list[str] = []
    followers: list[str] = []
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        return cls(
            id=user.id.value,
            username=user.name,
            full_name=user.full_name,
            avatar_url=user.avatar_url,
            farm_type=user.farm_type,
            crops=list(user.crops),
            following=sorted(user.following),
            followers=sorted(user.followers),
            created_at=user.created_at,
        )


class AuthorDTO(CamelModel):
    """Short user summary embedded in posts and comments."""

    id: str
    username: str
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None

    @classmethod
    def from_entity(cls, user: Optional[User]) -> Optional["AuthorDTO"]:
        if user is None:
            return None
        return cls(
            id=user.id.value,
            username=user.name,
            full_name=user.full_name,
            avatar_url=user.avatar_url,
        )
