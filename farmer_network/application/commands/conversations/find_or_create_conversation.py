"""
FindOrCreateConversation Command.

Exactly one conversation exists per distinct participant set:
1. Normalise the requested usernames into a ParticipantSet (needs >= 2)
2. Add the requester if they left themselves out
3. Return the conversation with an identical set if there is one
4. Otherwise resolve avatars and create it

If a concurrent request creates the same set first, the store rejects the
second insert and the winner is returned instead.
"""

import logging
from dataclasses import dataclass

from farmer_network.application.common.interfaces import Command, CommandHandler
from farmer_network.application.services.avatar_resolver import AvatarResolver
from farmer_network.domain.entities.conversation import Conversation
from farmer_network.domain.exceptions import DomainValidationError
from farmer_network.domain.ports.repositories import (
    ConversationAlreadyExistsError,
    ConversationRepository,
)
from farmer_network.domain.value_objects.participant_set import ParticipantSet

logger = logging.getLogger(__name__)


@dataclass
class FindOrCreateConversationResult:
    conversation: Conversation
    created: bool


@dataclass(frozen=True)
class FindOrCreateConversationCommand(Command[FindOrCreateConversationResult]):
    participants: tuple[str, ...]
    requester: str


class FindOrCreateConversationHandler(CommandHandler[FindOrCreateConversationResult]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        avatar_resolver: AvatarResolver,
    ):
        self._conversation_repository = conversation_repository
        self._avatar_resolver = avatar_resolver

    async def execute(
        self, command: FindOrCreateConversationCommand
    ) -> FindOrCreateConversationResult:
        try:
            requested = ParticipantSet.of(command.participants)
        except ValueError as e:
            raise DomainValidationError(str(e)) from e

        if len(requested) < 2:
            raise DomainValidationError(
                "Participants array with at least 2 users is required"
            )
        participants = requested.with_member(command.requester)

        existing = await self._conversation_repository.get_by_participants(participants)
        if existing:
            return FindOrCreateConversationResult(conversation=existing, created=False)

        avatar_map = await self._avatar_resolver.resolve(participants)
        conversation = Conversation.start(participants, avatar_map)
        try:
            await self._conversation_repository.add(conversation)
        except ConversationAlreadyExistsError:
            winner = await self._conversation_repository.get_by_participants(
                participants
            )
            if winner is None:
                raise
            logger.info(
                f"[FindOrCreateConversation] Lost creation race for {participants.key()}, "
                f"returning {winner.id.value}"
            )
            return FindOrCreateConversationResult(conversation=winner, created=False)

        logger.info(
            f"[FindOrCreateConversation] Created {conversation.id.value} "
            f"for {participants.key()}"
        )
        return FindOrCreateConversationResult(conversation=conversation, created=True)
