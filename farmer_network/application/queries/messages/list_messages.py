"""
ListMessages Query - full history of one conversation, oldest first.

Steps:
1. Verify conversation exists
2. Verify requester takes part in it
3. Load messages from the store
"""

from dataclasses import dataclass

from farmer_network.application.common.interfaces import Query, QueryHandler
from farmer_network.domain.entities.message import Message
from farmer_network.domain.exceptions import AccessDeniedError, EntityNotFoundError
from farmer_network.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
)
from farmer_network.domain.value_objects.conversation_id import ConversationId


@dataclass(frozen=True)
class ListMessagesQuery(Query[list[Message]]):
    conversation_id: ConversationId
    requester: str


class ListMessagesHandler(QueryHandler[list[Message]]):
    def __init__(
        self,
        conv_repo: ConversationRepository,
        msg_repo: MessageRepository,
    ):
        self._conv_repo = conv_repo
        self._msg_repo = msg_repo

    async def execute(self, query: ListMessagesQuery) -> list[Message]:
        conversation = await self._conv_repo.get_by_id(query.conversation_id)
        if not conversation:
            raise EntityNotFoundError("Conversation not found")

        if not conversation.has_participant(query.requester):
            raise AccessDeniedError("You are not a participant in this conversation")

        messages = await self._msg_repo.get_by_conversation(query.conversation_id)
        return sorted(messages, key=lambda m: m.sort_key())
