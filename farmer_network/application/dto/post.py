"""Post and comment DTOs."""

from datetime import datetime
from typing import Optional

from farmer_network.application.dto.base import CamelModel
from farmer_network.application.dto.user import AuthorDTO
from farmer_network.domain.entities.comment import Comment
from farmer_network.domain.entities.post import Post
from farmer_network.domain.entities.user import User


class PostDTO(CamelModel):
    id: str
    author_id: str
    author: Optional[AuthorDTO] = None
    text: str
    image_urls: list[str] = []
    location: Optional[str] = None
    community: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, post: Post, author: Optional[User] = None) -> "PostDTO":
        return cls(
            id=post.id.value,
            author_id=post.author_id.value,
            author=AuthorDTO.from_entity(author),
            text=post.text,
            image_urls=list(post.image_urls),
            location=post.location,
            community=post.community,
            created_at=post.created_at,
        )


class CommentDTO(CamelModel):
    id: str
    post_id: str
    author_id: str
    author: Optional[AuthorDTO] = None
    text: str
    created_at: datetime

    @classmethod
    def from_entity(
        cls, comment: Comment, author: Optional[User] = None
    ) -> "CommentDTO":
        return cls(
            id=comment.id.value,
            post_id=comment.post_id.value,
            author_id=comment.author_id.value,
            author=AuthorDTO.from_entity(author),
            text=comment.text,
            created_at=comment.created_at,
        )
