"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Can change state over time
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from farmer_network.domain.entities.conversation import Conversation
from farmer_network.domain.entities.message import Message
from farmer_network.domain.entities.user import User
from farmer_network.domain.entities.post import Post
from farmer_network.domain.entities.comment import Comment
from farmer_network.domain.entities.resource import Resource, ResourceStatus

__all__ = [
    "Conversation",
    "Message",
    "User",
    "Post",
    "Comment",
    "Resource",
    "ResourceStatus",
]
