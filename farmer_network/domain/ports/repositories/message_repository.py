"""
Message Repository Port - Interface for message persistence.
Implementation: farmer_network/infrastructure/persistence/prisma_message_repository.py
"""

from abc import ABC, abstractmethod

from farmer_network.domain.entities.message import Message
from farmer_network.domain.value_objects.conversation_id import ConversationId


class MessageRepository(ABC):
    @abstractmethod
    async def add(self, message: Message) -> Message:
        """Insert and return the stored message (with its sequence assigned)."""
        ...

    @abstractmethod
    async def get_by_conversation(
        self, conversation_id: ConversationId
    ) -> list[Message]:
        """Full history, oldest first, ties broken by insertion order."""
        ...
