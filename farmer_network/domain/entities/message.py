"""
Message Entity - A single message in a conversation.

Messages are immutable once created. `sequence` is assigned by the store on
insert and breaks ties between messages sharing a timestamp.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from farmer_network.domain.value_objects.message_id import MessageId
from farmer_network.domain.value_objects.conversation_id import ConversationId


@dataclass(frozen=True)
class Message:
    id: MessageId
    conversation_id: ConversationId
    sender: str
    text: str
    created_at: datetime
    sequence: Optional[int] = None

    @classmethod
    def create(
        cls,
        conversation_id: ConversationId,
        sender: str,
        text: str,
    ) -> Message:
        """Factory method to create a new Message with a generated ID and timestamp."""
        cleaned = (text or "").strip()
        if not cleaned:
            raise ValueError("Message text is required")
        return cls(
            id=MessageId.generate(),
            conversation_id=conversation_id,
            sender=sender,
            text=cleaned,
            created_at=datetime.now(timezone.utc),
        )

    def sort_key(self) -> tuple[datetime, int]:
        return (self.created_at, self.sequence or 0)
