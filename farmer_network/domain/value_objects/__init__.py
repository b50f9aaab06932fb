"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from farmer_network.domain.value_objects.user_id import UserId
from farmer_network.domain.value_objects.username import Username
from farmer_network.domain.value_objects.conversation_id import ConversationId
from farmer_network.domain.value_objects.message_id import MessageId
from farmer_network.domain.value_objects.participant_set import ParticipantSet
from farmer_network.domain.value_objects.post_id import PostId
from farmer_network.domain.value_objects.comment_id import CommentId
from farmer_network.domain.value_objects.resource_id import ResourceId

__all__ = [
    "UserId",
    "Username",
    "ConversationId",
    "MessageId",
    "ParticipantSet",
    "PostId",
    "CommentId",
    "ResourceId",
]
