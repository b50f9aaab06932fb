"""Conversation-related queries."""

from farmer_network.application.queries.conversations.list_conversations import (
    ListConversationsQuery,
    ListConversationsHandler,
)

__all__ = [
    "ListConversationsQuery",
    "ListConversationsHandler",
]
