"""
User Entity - A farmer's account and public profile.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from farmer_network.domain.value_objects.user_id import UserId
from farmer_network.domain.value_objects.username import Username


@dataclass
class User:
    # Required fields (no defaults) - must come first
    id: UserId
    username: Username
    password_hash: str
    created_at: datetime
    # Optional fields (with defaults) - must come last
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    farm_type: Optional[str] = None
    crops: list[str] = field(default_factory=list)
    following: set[str] = field(default_factory=set)
    followers: set[str] = field(default_factory=set)

    @classmethod
    def register(
        cls,
        username: Username,
        password_hash: str,
        full_name: Optional[str] = None,
        avatar_url: Optional[str] = None,
        farm_type: Optional[str] = None,
        crops: Optional[list[str]] = None,
    ) -> User:
        return cls(
            id=UserId.generate(),
            username=username,
            password_hash=password_hash,
            created_at=datetime.now(timezone.utc),
            full_name=full_name,
            avatar_url=avatar_url,
            farm_type=farm_type,
            crops=_clean_crops(crops),
        )

    @property
    def name(self) -> str:
        return self.username.value

    def follow(self, other: User) -> None:
        """Add `other` to following (and self to their followers). Idempotent."""
        if other.name == self.name:
            raise ValueError("You cannot follow yourself")
        self.following.add(other.name)
        other.followers.add(self.name)

    def unfollow(self, other: User) -> None:
        self.following.discard(other.name)
        other.followers.discard(self.name)

    def update_profile(
        self,
        full_name: Optional[str] = None,
        avatar_url: Optional[str] = None,
        farm_type: Optional[str] = None,
        crops: Optional[list[str]] = None,
    ) -> None:
        if full_name is not None:
            self.full_name = full_name.strip() or None
        if avatar_url is not None:
            self.avatar_url = avatar_url.strip() or None
        if farm_type is not None:
            self.farm_type = farm_type.strip() or None
        if crops is not None:
            self.crops = _clean_crops(crops)


def _clean_crops(crops: Optional[list[str]]) -> list[str]:
    seen: list[str] = []
    for crop in crops or []:
        crop = crop.strip()
        if crop and crop not in seen:
            seen.append(crop)
    return seen
