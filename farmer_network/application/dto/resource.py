"""Resource board DTOs."""

from datetime import datetime
from typing import Optional

from farmer_network.application.dto.base import CamelModel
from farmer_network.domain.entities.resource import Resource


class ResourceDTO(CamelModel):
    id: str
    name: str
    status: str
    owner: str
    contact: str
    location: str
    next_available: str
    created_at: datetime
    created_by: Optional[str] = None

    @classmethod
    def from_entity(cls, resource: Resource) -> "ResourceDTO":
        return cls(
            id=resource.id.value,
            name=resource.name,
            status=resource.status,
            owner=resource.owner,
            contact=resource.contact,
            location=resource.location,
            next_available=resource.next_available,
            created_at=resource.created_at,
            created_by=resource.created_by.value if resource.created_by else None,
        )
