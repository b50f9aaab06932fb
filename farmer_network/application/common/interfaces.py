"""
Base interfaces for the CQRS handlers.

Commands change state (start a conversation, post a message, follow a user);
queries only read. Both are frozen dataclasses carrying the acting identity
explicitly, and each has exactly one handler with an async `execute`.

Handlers raise domain exceptions (farmer_network.domain.exceptions) and never
build HTTP responses; the routers translate.

Usage:
    @dataclass(frozen=True)
    class AppendMessageCommand(Command[Message]):
        conversation_id: ConversationId
        sender: str
        text: str

    class AppendMessageHandler(CommandHandler[Message]):
        def __init__(self, conv_repo: ConversationRepository, msg_repo: MessageRepository):
            self._conv_repo = conv_repo
            self._msg_repo = msg_repo

        async def execute(self, command: AppendMessageCommand) -> Message:
            ...
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

TResult = TypeVar("TResult")


class Command(ABC, Generic[TResult]):
    """A write operation whose handler returns TResult."""


class CommandHandler(ABC, Generic[TResult]):
    @abstractmethod
    async def execute(self, command: Command[TResult]) -> TResult: ...


class Query(ABC, Generic[TResult]):
    """A read-only operation whose handler returns TResult."""


class QueryHandler(ABC, Generic[TResult]):
    @abstractmethod
    async def execute(self, query: Query[TResult]) -> TResult: ...
