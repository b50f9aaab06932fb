"""Application services shared by several handlers."""

from farmer_network.application.services.avatar_resolver import AvatarResolver

__all__ = ["AvatarResolver"]
