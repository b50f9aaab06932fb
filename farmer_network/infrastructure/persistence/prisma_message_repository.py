"""
Prisma Message Repository Implementation.

Prisma Message Model (from prisma/schema.prisma):
    model Message {
        id              String   @id
        conversation_id String
        sender          String
        text            String
        sequence        Int      @default(autoincrement())
        created_at      DateTime @default(now())
    }

Messages are insert-only. `sequence` comes back from the insert and is the
tie-break for identical timestamps.
"""

from prisma import Prisma
from prisma.models import Message as PrismaMessage
from farmer_network.domain.entities.message import Message
from farmer_network.domain.ports.repositories.message_repository import MessageRepository
from farmer_network.domain.value_objects.message_id import MessageId
from farmer_network.domain.value_objects.conversation_id import ConversationId


class PrismaMessageRepository(MessageRepository):
    """
    Prisma implementation of MessageRepository.

    Handles persistence of Message entities to PostgreSQL via Prisma.
    """

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        """
        Initialize repository with Prisma client.

        Args:
            prisma: Connected Prisma client (injected by DI container)
        """
        self._prisma = prisma

    def _to_entity(self, record: PrismaMessage) -> Message:
        return Message(
            id=MessageId(record.id),
            conversation_id=ConversationId(record.conversation_id),
            sender=record.sender,
            text=record.text,
            created_at=record.created_at,
            sequence=record.sequence,
        )

    async def add(self, message: Message) -> Message:
        """
        Insert a message.

        Returns:
            The stored message, including its store-assigned sequence
        """
        record = await self._prisma.message.create(
            data={
                "id": message.id.value,
                "conversation_id": message.conversation_id.value,
                "sender": message.sender,
                "text": message.text,
                "created_at": message.created_at,
            }
        )
        return self._to_entity(record)

    async def get_by_conversation(
        self, conversation_id: ConversationId
    ) -> list[Message]:
        """
        Get all messages for a conversation, oldest first.

        No pagination: the whole history is returned.
        """
        records = await self._prisma.message.find_many(
            where={"conversation_id": conversation_id.value},
            order=[{"created_at": "asc"}, {"sequence": "asc"}],
        )
        return [self._to_entity(record) for record in records]
