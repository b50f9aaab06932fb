"""
AvatarResolver - looks up current avatar URLs in the identity store.

Conversations cache avatars in `avatar_map`; this is the only place that
fills that cache. Users without an avatar (or unknown usernames) are simply
left out of the result.
"""

import logging
from typing import Iterable, Optional

from farmer_network.domain.ports.repositories import UserRepository

logger = logging.getLogger(__name__)


class AvatarResolver:
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def resolve(self, usernames: Iterable[str]) -> dict[str, str]:
        wanted = sorted(set(usernames))
        if not wanted:
            return {}
        users = await self._user_repository.get_many_by_username(wanted)
        avatar_map = {u.name: u.avatar_url for u in users if u.avatar_url}
        logger.debug(f"[AvatarResolver] {len(avatar_map)}/{len(wanted)} avatars found")
        return avatar_map

    async def resolve_one(self, username: str) -> Optional[str]:
        user = await self._user_repository.get_by_username(username)
        return user.avatar_url if user and user.avatar_url else None
