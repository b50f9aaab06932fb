"""
Post Entity - A farmer's post, optionally filed under a crop community.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from farmer_network.domain.value_objects.post_id import PostId
from farmer_network.domain.value_objects.user_id import UserId


@dataclass
class Post:
    id: PostId
    author_id: UserId
    text: str
    created_at: datetime
    updated_at: datetime
    image_urls: list[str] = field(default_factory=list)
    location: Optional[str] = None
    community: Optional[str] = None

    @classmethod
    def create(
        cls,
        author_id: UserId,
        text: str,
        image_urls: Optional[list[str]] = None,
        location: Optional[str] = None,
        community: Optional[str] = None,
    ) -> Post:
        cleaned = (text or "").strip()
        if not cleaned:
            raise ValueError("Post text is required")
        now = datetime.now(timezone.utc)
        return cls(
            id=PostId.generate(),
            author_id=author_id,
            text=cleaned,
            created_at=now,
            updated_at=now,
            image_urls=list(image_urls or []),
            location=(location or "").strip() or None,
            community=normalize_community(community),
        )

    def is_authored_by(self, user_id: UserId) -> bool:
        return self.author_id.value == user_id.value


def normalize_community(community: Optional[str]) -> Optional[str]:
    """Communities are crop names; compare them case-insensitively."""
    if community is None:
        return None
    return community.strip().lower() or None
