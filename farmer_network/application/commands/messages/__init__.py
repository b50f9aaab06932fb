"""Message commands."""

from .append_message import AppendMessageCommand, AppendMessageHandler

__all__ = [
    "AppendMessageCommand",
    "AppendMessageHandler",
]
