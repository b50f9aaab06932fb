"""
Conversation Entity - A direct or group chat between farmers.

The participant set is the conversation's identity. `last_message`,
`last_message_at` and `avatar_map` are a denormalised summary kept for the
inbox view; the message store and the identity store remain authoritative.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from farmer_network.domain.value_objects.conversation_id import ConversationId
from farmer_network.domain.value_objects.participant_set import ParticipantSet

if TYPE_CHECKING:
    from farmer_network.domain.entities.message import Message


@dataclass
class Conversation:
    id: ConversationId
    participants: ParticipantSet
    last_message: str
    last_message_at: datetime
    created_at: datetime
    updated_at: datetime
    avatar_map: dict[str, str] = field(default_factory=dict)

    @classmethod
    def start(
        cls, participants: ParticipantSet, avatar_map: dict[str, str]
    ) -> Conversation:
        """Factory method for a brand new, empty conversation."""
        if len(participants) < 2:
            raise ValueError("A conversation needs at least 2 participants")
        now = datetime.now(timezone.utc)
        return cls(
            id=ConversationId.generate(),
            participants=participants,
            last_message="",
            last_message_at=now,
            created_at=now,
            updated_at=now,
            avatar_map={u: url for u, url in avatar_map.items() if u in participants},
        )

    def has_participant(self, username: str) -> bool:
        return username in self.participants

    def record_message(self, message: Message) -> None:
        """Move the cached summary forward to the given message."""
        self.last_message = message.text
        self.last_message_at = message.created_at
        self.updated_at = datetime.now(timezone.utc)

    def has_avatar_for(self, username: str) -> bool:
        return bool(self.avatar_map.get(username))

    def cache_avatar(self, username: str, avatar_url: str) -> None:
        if username not in self.participants:
            raise ValueError(f"{username} is not a participant")
        self.avatar_map[username] = avatar_url

    def replace_avatar_map(self, avatar_map: dict[str, str]) -> None:
        self.avatar_map = {
            u: url for u, url in avatar_map.items() if u in self.participants
        }
        self.updated_at = datetime.now(timezone.utc)

    @property
    def needs_avatar_backfill(self) -> bool:
        return not self.avatar_map
