"""Resource board queries."""

from farmer_network.application.queries.resources.list_resources import (
    ListResourcesQuery,
    ListResourcesHandler,
)

__all__ = ["ListResourcesQuery", "ListResourcesHandler"]
