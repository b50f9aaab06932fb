"""
FileStorageService - Pure disk I/O for uploaded images.

Images are written flat under UPLOAD_BASE and served back by the static
mount at UPLOAD_URL_PREFIX, so a stored file's public URL is
`/uploads/<stored name>`.

This is a SYNC service - no database, no async.
"""

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import uuid4

from werkzeug.utils import secure_filename

from farmer_network.config.settings import Config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredFile:
    path: str
    url: str
    size_bytes: int


class FileStorageService:
    """
    Pure file system operations service.

    All methods are synchronous since file I/O in Python is sync.
    """

    def __init__(
        self,
        upload_base: Optional[str] = None,
        url_prefix: Optional[str] = None,
        allowed_extensions: Optional[list[str]] = None,
        max_bytes: Optional[int] = None,
    ):
        self.upload_base = upload_base or Config.UPLOAD_BASE
        self.url_prefix = (url_prefix or Config.UPLOAD_URL_PREFIX).rstrip("/")
        self.allowed_extensions = [
            e.strip().lower()
            for e in (allowed_extensions or Config.ALLOWED_IMAGE_EXTENSIONS)
            if e.strip()
        ]
        self.max_bytes = max_bytes or int(Config.MAX_UPLOAD_MB * 1024 * 1024)

    def validate_image(self, filename: str, content: bytes) -> None:
        """
        Raises:
            ValueError: unsupported extension, empty or oversized file
        """
        ext = self.get_extension(filename)
        if ext not in self.allowed_extensions:
            raise ValueError(
                f"Unsupported image type '{ext or filename}'. "
                f"Allowed: {', '.join(self.allowed_extensions)}"
            )
        if not content:
            raise ValueError(f"Image {filename} is empty")
        if len(content) > self.max_bytes:
            raise ValueError(
                f"Image {filename} is too large. Maximum upload size is {Config.MAX_UPLOAD_MB} MB."
            )

    def save_image(self, content: bytes, filename: str) -> StoredFile:
        """
        Save image content to disk under a unique name.

        Returns:
            StoredFile with absolute path and public URL
        """
        self.validate_image(filename, content)
        os.makedirs(self.upload_base, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        stored_name = f"{timestamp}_{uuid4().hex[:8]}_{self._sanitize_filename(filename)}"
        file_path = os.path.join(self.upload_base, stored_name)

        with open(file_path, "wb") as f:
            f.write(content)

        logger.debug(f"[FileStorage] Saved file: {file_path} ({len(content)} bytes)")
        return StoredFile(
            path=os.path.abspath(file_path),
            url=f"{self.url_prefix}/{stored_name}",
            size_bytes=len(content),
        )

    def delete_by_url(self, url: str) -> bool:
        """
        Delete a previously stored file given its public URL.

        Returns:
            True if deleted, False if it was not one of ours or didn't exist
        """
        prefix = f"{self.url_prefix}/"
        if not url.startswith(prefix):
            return False
        file_path = os.path.join(self.upload_base, os.path.basename(url[len(prefix):]))
        if not os.path.exists(file_path):
            logger.warning(f"[FileStorage] File not found for deletion: {file_path}")
            return False
        os.remove(file_path)
        logger.debug(f"[FileStorage] Deleted file: {file_path}")
        return True

    def _sanitize_filename(self, filename: str) -> str:
        safe = secure_filename(filename)
        # Ensure not empty
        if not safe:
            safe = f"image.{self.get_extension(filename) or 'bin'}"
        return safe

    def get_extension(self, filename: str) -> str:
        """
        Get file extension from filename.

        Returns:
            Extension without dot (lowercase), or empty string
        """
        if "." in filename:
            return filename.rsplit(".", 1)[1].lower()
        return ""
