"""Prisma Resource Repository Implementation."""

from typing import Optional
from prisma import Prisma
from prisma.errors import RecordNotFoundError
from prisma.models import Resource as PrismaResource
from farmer_network.domain.entities.resource import Resource
from farmer_network.domain.ports.repositories import ResourceRepository
from farmer_network.domain.value_objects.resource_id import ResourceId
from farmer_network.domain.value_objects.user_id import UserId


class PrismaResourceRepository(ResourceRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaResource) -> Resource:
        return Resource(
            id=ResourceId(record.id),
            name=record.name,
            status=record.status,
            owner=record.owner,
            contact=record.contact,
            location=record.location,
            next_available=record.next_available,
            created_at=record.created_at,
            created_by=UserId(record.created_by) if record.created_by else None,
        )

    def _fields(self, resource: Resource) -> dict:
        return {
            "name": resource.name,
            "status": resource.status,
            "owner": resource.owner,
            "contact": resource.contact,
            "location": resource.location,
            "next_available": resource.next_available,
        }

    async def get_by_id(self, resource_id: ResourceId) -> Optional[Resource]:
        record = await self._prisma.resource.find_unique(
            where={"id": resource_id.value}
        )
        return self._to_entity(record) if record else None

    async def list_all(self) -> list[Resource]:
        records = await self._prisma.resource.find_many(order={"created_at": "desc"})
        return [self._to_entity(record) for record in records]

    async def add(self, resource: Resource) -> None:
        await self._prisma.resource.create(
            data={
                "id": resource.id.value,
                **self._fields(resource),
                "created_at": resource.created_at,
                "created_by": resource.created_by.value if resource.created_by else None,
            }
        )

    async def save(self, resource: Resource) -> None:
        await self._prisma.resource.update(
            where={"id": resource.id.value},
            data=self._fields(resource),
        )

    async def delete(self, resource_id: ResourceId) -> bool:
        try:
            await self._prisma.resource.delete(where={"id": resource_id.value})
            return True
        except RecordNotFoundError:
            return False
