"""Message queries."""

from farmer_network.application.queries.messages.list_messages import (
    ListMessagesQuery,
    ListMessagesHandler,
)

__all__ = [
    "ListMessagesQuery",
    "ListMessagesHandler",
]
