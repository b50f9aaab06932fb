"""
Prisma-backed repository provider.

Kept apart from AppProvider so that the rest of the container can be built
without a generated Prisma client.
"""

import logging
from typing import AsyncIterable

from dishka import Provider, Scope, provide
from prisma import Prisma

from farmer_network.domain.ports.repositories import (
    CommentRepository,
    ConversationRepository,
    MessageRepository,
    PostRepository,
    ResourceRepository,
    UserRepository,
)
from farmer_network.infrastructure.persistence import (
    PrismaCommentRepository,
    PrismaConversationRepository,
    PrismaMessageRepository,
    PrismaPostRepository,
    PrismaResourceRepository,
    PrismaUserRepository,
)

logger = logging.getLogger(__name__)


class PrismaProvider(Provider):
    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - Scope.APP = created ONCE, shared across all requests
        - Disconnected when the container closes on shutdown
        """
        prisma = Prisma()
        await prisma.connect()
        logger.info("Prisma client connected")
        yield prisma
        await prisma.disconnect()
        logger.info("Prisma client disconnected")

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_conversation_repository(self, prisma: Prisma) -> ConversationRepository:
        """
        Provide ConversationRepository implementation.

        - Return type is ABSTRACT (ConversationRepository)
        - Implementation is CONCRETE (PrismaConversationRepository)
        - Scope.REQUEST = new instance per HTTP request
        """
        return PrismaConversationRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, prisma: Prisma) -> MessageRepository:
        return PrismaMessageRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, prisma: Prisma) -> UserRepository:
        return PrismaUserRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, prisma: Prisma) -> PostRepository:
        return PrismaPostRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, prisma: Prisma) -> CommentRepository:
        return PrismaCommentRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_resource_repository(self, prisma: Prisma) -> ResourceRepository:
        return PrismaResourceRepository(prisma)
