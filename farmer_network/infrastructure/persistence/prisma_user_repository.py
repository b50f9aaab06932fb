"""
Prisma User Repository Implementation.

Follow sets are stored as Postgres text arrays and rebuilt into Python sets
on read. `save` writes profile fields only; follow edges change through
add_follow_edge/remove_follow_edge, which edit single array elements in SQL
so concurrent follows of the same user never overwrite each other.
"""

from typing import Iterable, Optional
from prisma import Prisma
from prisma.models import User as PrismaUser
from farmer_network.domain.entities.user import User
from farmer_network.domain.ports.repositories import UserRepository
from farmer_network.domain.value_objects.user_id import UserId
from farmer_network.domain.value_objects.username import Username


class PrismaUserRepository(UserRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaUser) -> User:
        return User(
            id=UserId(record.id),
            username=Username(record.username),
            password_hash=record.password_hash,
            created_at=record.created_at,
            full_name=record.full_name,
            avatar_url=record.avatar_url,
            farm_type=record.farm_type,
            crops=list(record.crops or []),
            following=set(record.following or []),
            followers=set(record.followers or []),
        )

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        record = await self._prisma.user.find_unique(where={"id": user_id.value})
        return self._to_entity(record) if record else None

    async def get_by_username(self, username: str) -> Optional[User]:
        record = await self._prisma.user.find_unique(where={"username": username})
        return self._to_entity(record) if record else None

    async def get_many_by_username(self, usernames: Iterable[str]) -> list[User]:
        wanted = list(usernames)
        if not wanted:
            return []
        records = await self._prisma.user.find_many(
            where={"username": {"in": wanted}}
        )
        return [self._to_entity(record) for record in records]

    async def get_many_by_id(self, user_ids: Iterable[UserId]) -> list[User]:
        wanted = [user_id.value for user_id in user_ids]
        if not wanted:
            return []
        records = await self._prisma.user.find_many(where={"id": {"in": wanted}})
        return [self._to_entity(record) for record in records]

    async def list_all(self) -> list[User]:
        records = await self._prisma.user.find_many(order={"created_at": "desc"})
        return [self._to_entity(record) for record in records]

    async def add(self, user: User) -> None:
        await self._prisma.user.create(
            data={
                "id": user.id.value,
                "username": user.name,
                "password_hash": user.password_hash,
                "full_name": user.full_name,
                "avatar_url": user.avatar_url,
                "farm_type": user.farm_type,
                "crops": list(user.crops),
                "following": sorted(user.following),
                "followers": sorted(user.followers),
                "created_at": user.created_at,
            }
        )

    async def save(self, user: User) -> None:
        await self._prisma.user.update(
            where={"id": user.id.value},
            data={
                "full_name": user.full_name,
                "avatar_url": user.avatar_url,
                "farm_type": user.farm_type,
                "crops": {"set": list(user.crops)},
            },
        )

    async def add_follow_edge(self, follower: str, target: str) -> None:
        async with self._prisma.tx() as transaction:
            await transaction.execute_raw(
                'UPDATE "users" SET following = array_append(following, $1) '
                "WHERE username = $2 AND NOT ($1 = ANY(following))",
                target,
                follower,
            )
            await transaction.execute_raw(
                'UPDATE "users" SET followers = array_append(followers, $1) '
                "WHERE username = $2 AND NOT ($1 = ANY(followers))",
                follower,
                target,
            )

    async def remove_follow_edge(self, follower: str, target: str) -> None:
        async with self._prisma.tx() as transaction:
            await transaction.execute_raw(
                'UPDATE "users" SET following = array_remove(following, $1) '
                "WHERE username = $2",
                target,
                follower,
            )
            await transaction.execute_raw(
                'UPDATE "users" SET followers = array_remove(followers, $1) '
                "WHERE username = $2",
                follower,
                target,
            )
