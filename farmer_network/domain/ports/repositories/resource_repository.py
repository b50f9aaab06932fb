"""
Resource Repository Port - Interface for the sharing board.
Implementation: farmer_network/infrastructure/persistence/prisma_resource_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from farmer_network.domain.entities.resource import Resource
from farmer_network.domain.value_objects.resource_id import ResourceId


class ResourceRepository(ABC):
    @abstractmethod
    async def get_by_id(self, resource_id: ResourceId) -> Optional[Resource]: ...

    @abstractmethod
    async def list_all(self) -> list[Resource]:
        """Newest first."""
        ...

    @abstractmethod
    async def add(self, resource: Resource) -> None: ...

    @abstractmethod
    async def save(self, resource: Resource) -> None: ...

    @abstractmethod
    async def delete(self, resource_id: ResourceId) -> bool: ...
