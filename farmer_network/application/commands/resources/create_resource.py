"""CreateResource Command - list equipment or supplies on the board."""

from dataclasses import dataclass

from farmer_network.application.common.interfaces import Command, CommandHandler
from farmer_network.domain.entities.resource import Resource
from farmer_network.domain.exceptions import DomainValidationError
from farmer_network.domain.ports.repositories import ResourceRepository
from farmer_network.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class CreateResourceCommand(Command[Resource]):
    created_by: UserId
    name: str
    status: str
    owner: str
    contact: str
    location: str
    next_available: str


class CreateResourceHandler(CommandHandler[Resource]):
    def __init__(self, resource_repository: ResourceRepository):
        self._resource_repository = resource_repository

    async def execute(self, command: CreateResourceCommand) -> Resource:
        try:
            resource = Resource.create(
                name=command.name,
                status=command.status,
                owner=command.owner,
                contact=command.contact,
                location=command.location,
                next_available=command.next_available,
                created_by=command.created_by,
            )
        except ValueError as e:
            raise DomainValidationError(str(e)) from e

        await self._resource_repository.add(resource)
        return resource
