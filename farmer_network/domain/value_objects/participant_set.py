"""
ParticipantSet Value Object - the unordered set of usernames in a conversation.

Two conversations are the same conversation exactly when their participant
sets are equal, so the set (not the order it was supplied in) is the key.
"""

from dataclasses import dataclass
from typing import Iterable

from farmer_network.domain.value_objects.username import Username

KEY_SEPARATOR = ","


@dataclass(frozen=True)
class ParticipantSet:
    members: frozenset[str]

    def __post_init__(self):
        for member in self.members:
            Username(member)  # raises ValueError if invalid

    @classmethod
    def of(cls, usernames: Iterable[str]) -> "ParticipantSet":
        """Build from raw input, trimming entries and dropping blanks/duplicates."""
        cleaned = {u.strip() for u in usernames if u and u.strip()}
        return cls(frozenset(cleaned))

    @classmethod
    def from_key(cls, key: str) -> "ParticipantSet":
        return cls(frozenset(key.split(KEY_SEPARATOR)) if key else frozenset())

    def with_member(self, username: str) -> "ParticipantSet":
        return ParticipantSet(self.members | {username})

    def key(self) -> str:
        """Normalised form used for lookups and the uniqueness constraint."""
        return KEY_SEPARATOR.join(sorted(self.members))

    def sorted(self) -> list[str]:
        return sorted(self.members)

    def __contains__(self, username: object) -> bool:
        return username in self.members

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self):
        return iter(self.sorted())
