"""UpdateResource Command - only the creator may edit a listing."""

from dataclasses import dataclass
from typing import Optional

from farmer_network.application.common.interfaces import Command, CommandHandler
from farmer_network.domain.entities.resource import Resource
from farmer_network.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from farmer_network.domain.ports.repositories import ResourceRepository
from farmer_network.domain.value_objects.resource_id import ResourceId
from farmer_network.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class UpdateResourceCommand(Command[Resource]):
    resource_id: ResourceId
    requester_id: UserId
    name: Optional[str] = None
    status: Optional[str] = None
    owner: Optional[str] = None
    contact: Optional[str] = None
    location: Optional[str] = None
    next_available: Optional[str] = None


class UpdateResourceHandler(CommandHandler[Resource]):
    def __init__(self, resource_repository: ResourceRepository):
        self._resource_repository = resource_repository

    async def execute(self, command: UpdateResourceCommand) -> Resource:
        resource = await self._resource_repository.get_by_id(command.resource_id)
        if not resource:
            raise EntityNotFoundError(f"Resource {command.resource_id.value} not found")
        if not resource.is_created_by(command.requester_id):
            raise AccessDeniedError("You can only edit resources you listed")

        try:
            resource.update(
                name=command.name,
                status=command.status,
                owner=command.owner,
                contact=command.contact,
                location=command.location,
                next_available=command.next_available,
            )
        except ValueError as e:
            raise DomainValidationError(str(e)) from e

        await self._resource_repository.save(resource)
        return resource
