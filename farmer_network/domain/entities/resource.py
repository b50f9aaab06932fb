"""
Resource Entity - Equipment or supplies offered on the sharing board.

`status` is free text; ResourceStatus lists the values the web client offers.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from farmer_network.domain.value_objects.resource_id import ResourceId
from farmer_network.domain.value_objects.user_id import UserId


class ResourceStatus(str, Enum):
    AVAILABLE = "Available"
    BORROWED = "Borrowed"
    UNDER_MAINTENANCE = "Under Maintenance"


EDITABLE_FIELDS = ("name", "status", "owner", "contact", "location", "next_available")


@dataclass
class Resource:
    id: ResourceId
    name: str
    status: str
    owner: str
    contact: str
    location: str
    next_available: str
    created_at: datetime
    created_by: Optional[UserId] = None

    def __post_init__(self):
        for f in fields(self):
            if f.name in EDITABLE_FIELDS:
                value = getattr(self, f.name)
                if not isinstance(value, str) or not value.strip():
                    raise ValueError(f"Resource {f.name} is required")
                setattr(self, f.name, value.strip())

    @classmethod
    def create(
        cls,
        name: str,
        status: str,
        owner: str,
        contact: str,
        location: str,
        next_available: str,
        created_by: Optional[UserId] = None,
    ) -> Resource:
        return cls(
            id=ResourceId.generate(),
            name=name,
            status=status,
            owner=owner,
            contact=contact,
            location=location,
            next_available=next_available,
            created_at=datetime.now(timezone.utc),
            created_by=created_by,
        )

    def is_created_by(self, user_id: UserId) -> bool:
        return self.created_by is not None and self.created_by.value == user_id.value

    def update(self, **changes: Optional[str]) -> None:
        for name, value in changes.items():
            if name not in EDITABLE_FIELDS:
                raise ValueError(f"Unknown resource field: {name}")
            if value is None:
                continue
            if not value.strip():
                raise ValueError(f"Resource {name} cannot be empty")
            setattr(self, name, value.strip())
