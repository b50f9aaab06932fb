"""
Persistence Layer - Database implementations.

Contains Prisma repository implementations for domain ports. Importing this
package requires a generated Prisma client (`prisma generate`).
"""

from farmer_network.infrastructure.persistence.prisma_conversation_repository import (
    PrismaConversationRepository,
)
from farmer_network.infrastructure.persistence.prisma_message_repository import (
    PrismaMessageRepository,
)
from farmer_network.infrastructure.persistence.prisma_user_repository import (
    PrismaUserRepository,
)
from farmer_network.infrastructure.persistence.prisma_post_repository import (
    PrismaPostRepository,
)
from farmer_network.infrastructure.persistence.prisma_comment_repository import (
    PrismaCommentRepository,
)
from farmer_network.infrastructure.persistence.prisma_resource_repository import (
    PrismaResourceRepository,
)

__all__ = [
    "PrismaConversationRepository",
    "PrismaMessageRepository",
    "PrismaUserRepository",
    "PrismaPostRepository",
    "PrismaCommentRepository",
    "PrismaResourceRepository",
]
