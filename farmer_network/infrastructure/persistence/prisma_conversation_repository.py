"""
Prisma Conversation Repository Implementation.

Mapping:
- Prisma model fields: id, participants, participant_key, last_message,
  last_message_at, avatar_map (Json), created_at, updated_at
- Domain entity: Conversation with value objects (ConversationId, ParticipantSet)

`participant_key` is the sorted participant list and carries the unique
constraint, so set-equality lookups are a single unique read and duplicate
creation surfaces as ConversationAlreadyExistsError.
"""

from typing import Optional
from prisma import Json, Prisma
from prisma.errors import UniqueViolationError
from prisma.models import Conversation as PrismaConversation
from farmer_network.domain.entities.conversation import Conversation
from farmer_network.domain.ports.repositories import (
    ConversationAlreadyExistsError,
    ConversationRepository,
)
from farmer_network.domain.value_objects.conversation_id import ConversationId
from farmer_network.domain.value_objects.participant_set import ParticipantSet


class PrismaConversationRepository(ConversationRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaConversation) -> Conversation:
        """Map Prisma record to domain entity."""
        return Conversation(
            id=ConversationId(record.id),
            participants=ParticipantSet.from_key(record.participant_key),
            last_message=record.last_message or "",
            last_message_at=record.last_message_at,
            created_at=record.created_at,
            updated_at=record.updated_at,
            avatar_map=dict(record.avatar_map or {}),
        )

    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        record = await self._prisma.conversation.find_unique(
            where={"id": conversation_id.value}
        )
        return self._to_entity(record) if record else None

    async def get_by_participants(
        self, participants: ParticipantSet
    ) -> Optional[Conversation]:
        record = await self._prisma.conversation.find_unique(
            where={"participant_key": participants.key()}
        )
        return self._to_entity(record) if record else None

    async def get_by_participant(self, username: str) -> list[Conversation]:
        records = await self._prisma.conversation.find_many(
            where={"participants": {"has": username}},
            order={"last_message_at": "desc"},
        )
        return [self._to_entity(record) for record in records]

    async def add(self, conversation: Conversation) -> None:
        try:
            await self._prisma.conversation.create(
                data={
                    "id": conversation.id.value,
                    "participants": conversation.participants.sorted(),
                    "participant_key": conversation.participants.key(),
                    "last_message": conversation.last_message,
                    "last_message_at": conversation.last_message_at,
                    "avatar_map": Json(conversation.avatar_map),
                    "created_at": conversation.created_at,
                    "updated_at": conversation.updated_at,
                }
            )
        except UniqueViolationError as e:
            raise ConversationAlreadyExistsError(conversation.participants.key()) from e

    async def save(self, conversation: Conversation) -> None:
        """Persist the summary fields; participants never change."""
        await self._prisma.conversation.update(
            where={"id": conversation.id.value},
            data={
                "last_message": conversation.last_message,
                "last_message_at": conversation.last_message_at,
                "avatar_map": Json(conversation.avatar_map),
                "updated_at": conversation.updated_at,
            },
        )

    async def save_avatar_map(
        self, conversation_id: ConversationId, avatar_map: dict[str, str]
    ) -> None:
        await self._prisma.conversation.update(
            where={"id": conversation_id.value},
            data={"avatar_map": Json(avatar_map)},
        )
