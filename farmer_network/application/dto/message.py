"""Message DTOs for API request/response."""

from datetime import datetime

from farmer_network.application.dto.base import CamelModel
from farmer_network.domain.entities.message import Message


class MessageDTO(CamelModel):
    """DTO for message data returned to frontend."""

    id: str
    conversation_id: str
    sender: str
    text: str
    created_at: datetime

    @classmethod
    def from_entity(cls, message: Message) -> "MessageDTO":
        return cls(
            id=message.id.value,
            conversation_id=message.conversation_id.value,
            sender=message.sender,
            text=message.text,
            created_at=message.created_at,
        )
