"""
AppendMessage Command - Post a message into a conversation as the caller.

Handler:
1. Reject blank text (before touching the store)
2. Load conversation, 404 if missing
3. Verify sender is a participant, 403 otherwise
4. Store the message
5. Move the conversation summary (last message, timestamp, sender avatar)
"""

import logging
from dataclasses import dataclass

from farmer_network.application.common.interfaces import Command, CommandHandler
from farmer_network.application.services.avatar_resolver import AvatarResolver
from farmer_network.domain.entities.message import Message
from farmer_network.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from farmer_network.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
)
from farmer_network.domain.value_objects.conversation_id import ConversationId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppendMessageCommand(Command[Message]):
    conversation_id: ConversationId
    sender: str  # always the authenticated username
    text: str


class AppendMessageHandler(CommandHandler[Message]):
    def __init__(
        self,
        conv_repo: ConversationRepository,
        msg_repo: MessageRepository,
        avatar_resolver: AvatarResolver,
    ):
        self._conv_repo = conv_repo
        self._msg_repo = msg_repo
        self._avatar_resolver = avatar_resolver

    async def execute(self, command: AppendMessageCommand) -> Message:
        text = (command.text or "").strip()
        if not text:
            raise DomainValidationError("Message text is required")

        conversation = await self._conv_repo.get_by_id(command.conversation_id)
        if not conversation:
            raise EntityNotFoundError("Conversation not found")

        if not conversation.has_participant(command.sender):
            raise AccessDeniedError("You are not a participant in this conversation")

        message = await self._msg_repo.add(
            Message.create(conversation.id, command.sender, text)
        )

        conversation.record_message(message)
        if not conversation.has_avatar_for(command.sender):
            avatar_url = await self._avatar_resolver.resolve_one(command.sender)
            if avatar_url:
                conversation.cache_avatar(command.sender, avatar_url)
        await self._conv_repo.save(conversation)

        logger.debug(
            f"[AppendMessage] {command.sender} -> {conversation.id.value} ({message.id.value})"
        )
        return message
