"""
Conversation Repository Port - Interface for conversation persistence.
Implementation: farmer_network/infrastructure/persistence/prisma_conversation_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from farmer_network.domain.entities.conversation import Conversation
from farmer_network.domain.value_objects.conversation_id import ConversationId
from farmer_network.domain.value_objects.participant_set import ParticipantSet


class ConversationAlreadyExistsError(Exception):
    """Raised by add() when another conversation already owns the participant set."""


class ConversationRepository(ABC):
    @abstractmethod
    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]: ...

    @abstractmethod
    async def get_by_participants(
        self, participants: ParticipantSet
    ) -> Optional[Conversation]:
        """Exact set match: same size, same members."""
        ...

    @abstractmethod
    async def get_by_participant(self, username: str) -> list[Conversation]:
        """All conversations the user takes part in, newest activity first."""
        ...

    @abstractmethod
    async def add(self, conversation: Conversation) -> None: ...

    @abstractmethod
    async def save(self, conversation: Conversation) -> None: ...

    @abstractmethod
    async def save_avatar_map(
        self, conversation_id: ConversationId, avatar_map: dict[str, str]
    ) -> None:
        """Overwrite only the avatar cache, leaving the summary fields alone."""
        ...
