"""
List Conversations Query.

Returns the user's conversations, most recently active first. Conversations
with an empty avatar cache get it rebuilt from the identity store and
persisted on the way out; a failed repair is logged and skipped.
"""

import logging
from dataclasses import dataclass

from farmer_network.application.common.interfaces import Query, QueryHandler
from farmer_network.application.services.avatar_resolver import AvatarResolver
from farmer_network.domain.entities.conversation import Conversation
from farmer_network.domain.ports.repositories.conversation_repository import (
    ConversationRepository,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListConversationsQuery(Query[list[Conversation]]):
    username: str


class ListConversationsHandler(QueryHandler[list[Conversation]]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        avatar_resolver: AvatarResolver,
    ):
        self._conversation_repository = conversation_repository
        self._avatar_resolver = avatar_resolver

    async def execute(self, query: ListConversationsQuery) -> list[Conversation]:
        conversations = await self._conversation_repository.get_by_participant(
            query.username
        )
        for conversation in conversations:
            if conversation.needs_avatar_backfill:
                await self._backfill_avatars(conversation)
        return sorted(conversations, key=lambda c: c.last_message_at, reverse=True)

    async def _backfill_avatars(self, conversation: Conversation) -> None:
        try:
            avatar_map = await self._avatar_resolver.resolve(conversation.participants)
            if not avatar_map:
                return
            conversation.replace_avatar_map(avatar_map)
            await self._conversation_repository.save_avatar_map(
                conversation.id, conversation.avatar_map
            )
        except Exception as e:
            logger.warning(
                f"[ListConversations] Avatar backfill failed for {conversation.id.value}: {e}"
            )
