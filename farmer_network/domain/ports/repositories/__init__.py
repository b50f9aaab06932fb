"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the domain needs
- Does NOT specify implementation (Prisma, in-memory, etc.)

Infrastructure layer provides implementations.
"""

from farmer_network.domain.ports.repositories.conversation_repository import (
    ConversationRepository,
    ConversationAlreadyExistsError,
)
from farmer_network.domain.ports.repositories.message_repository import MessageRepository
from farmer_network.domain.ports.repositories.user_repository import UserRepository
from farmer_network.domain.ports.repositories.post_repository import PostRepository
from farmer_network.domain.ports.repositories.comment_repository import CommentRepository
from farmer_network.domain.ports.repositories.resource_repository import ResourceRepository

__all__ = [
    "ConversationRepository",
    "ConversationAlreadyExistsError",
    "MessageRepository",
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "ResourceRepository",
]
