"""
Comment Entity - A reply under a post.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from farmer_network.domain.value_objects.comment_id import CommentId
from farmer_network.domain.value_objects.post_id import PostId
from farmer_network.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class Comment:
    id: CommentId
    post_id: PostId
    author_id: UserId
    text: str
    created_at: datetime

    @classmethod
    def create(cls, post_id: PostId, author_id: UserId, text: str) -> Comment:
        cleaned = (text or "").strip()
        if not cleaned:
            raise ValueError("Comment text is required")
        return cls(
            id=CommentId.generate(),
            post_id=post_id,
            author_id=author_id,
            text=cleaned,
            created_at=datetime.now(timezone.utc),
        )
