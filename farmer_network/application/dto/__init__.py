"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- conversation.py → ConversationDTO
- message.py      → MessageDTO
- user.py         → UserDTO, AuthorDTO
- post.py         → PostDTO, CommentDTO
- resource.py     → ResourceDTO

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
All DTOs serialise with camelCase keys (lastMessage, avatarMap, ...).
"""

from farmer_network.application.dto.base import CamelModel
from farmer_network.application.dto.conversation import ConversationDTO
from farmer_network.application.dto.message import MessageDTO
from farmer_network.application.dto.user import UserDTO, AuthorDTO
from farmer_network.application.dto.post import PostDTO, CommentDTO
from farmer_network.application.dto.resource import ResourceDTO

__all__ = [
    "CamelModel",
    "ConversationDTO",
    "MessageDTO",
    "UserDTO",
    "AuthorDTO",
    "PostDTO",
    "CommentDTO",
    "ResourceDTO",
]
