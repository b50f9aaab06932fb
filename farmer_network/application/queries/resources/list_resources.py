"""ListResources Query - newest listings first."""

from dataclasses import dataclass

from farmer_network.application.common.interfaces import Query, QueryHandler
from farmer_network.domain.entities.resource import Resource
from farmer_network.domain.ports.repositories import ResourceRepository


@dataclass(frozen=True)
class ListResourcesQuery(Query[list[Resource]]):
    pass


class ListResourcesHandler(QueryHandler[list[Resource]]):
    def __init__(self, resource_repository: ResourceRepository):
        self._resource_repository = resource_repository

    async def execute(self, query: ListResourcesQuery) -> list[Resource]:
        return await self._resource_repository.list_all()
