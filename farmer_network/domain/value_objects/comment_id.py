"""
CommentId Value Object - UUID wrapper for comment identity.
"""

from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True)
class CommentId:
    value: str  # comment_id, presented as UUID string

    def __post_init__(self):
        if not self.value:
            raise ValueError("Comment ID cannot be empty")
        UUID(self.value)  # raises ValueError if invalid UUID

    @classmethod
    def generate(cls) -> "CommentId":
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
