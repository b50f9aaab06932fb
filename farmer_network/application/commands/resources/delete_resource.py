"""DeleteResource Command."""

from dataclasses import dataclass

from farmer_network.application.common.interfaces import Command, CommandHandler
from farmer_network.domain.exceptions import AccessDeniedError, EntityNotFoundError
from farmer_network.domain.ports.repositories import ResourceRepository
from farmer_network.domain.value_objects.resource_id import ResourceId
from farmer_network.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class DeleteResourceCommand(Command[bool]):
    resource_id: ResourceId
    requester_id: UserId


class DeleteResourceHandler(CommandHandler[bool]):
    def __init__(self, resource_repository: ResourceRepository):
        self._resource_repository = resource_repository

    async def execute(self, command: DeleteResourceCommand) -> bool:
        resource = await self._resource_repository.get_by_id(command.resource_id)
        if not resource:
            raise EntityNotFoundError(f"Resource {command.resource_id.value} not found")
        if not resource.is_created_by(command.requester_id):
            raise AccessDeniedError("You can only remove resources you listed")

        return await self._resource_repository.delete(command.resource_id)
