"""Disk storage for uploaded post images."""

from farmer_network.infrastructure.storage.file_storage_service import (
    FileStorageService,
    StoredFile,
)

__all__ = ["FileStorageService", "StoredFile"]
