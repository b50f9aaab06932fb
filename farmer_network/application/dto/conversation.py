"""Conversation DTOs for API request/response."""

from datetime import datetime

from farmer_network.application.dto.base import CamelModel
from farmer_network.domain.entities.conversation import Conversation


class ConversationDTO(CamelModel):
    id: str
    participants: list[str]
    last_message: str = ""
    last_message_at: datetime
    avatar_map: dict[str, str] = {}
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, conversation: Conversation) -> "ConversationDTO":
        return cls(
            id=conversation.id.value,
            participants=conversation.participants.sorted(),
            last_message=conversation.last_message,
            last_message_at=conversation.last_message_at,
            avatar_map=dict(conversation.avatar_map),
            created_at=conversation.created_at,
            updated_at=conversation.updated_at,
        )
