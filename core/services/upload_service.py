# =============================================================================
# core/services/upload_service.py - Member Photo Storage
# =============================================================================
# Stores uploaded member photos on the local filesystem under IMAGES_PATH.
# Files get a random name; the original client filename is never used on disk.
# =============================================================================

import logging
import os
from pathlib import Path
from uuid import uuid4

from app.exceptions import StorageWriteError

logger = logging.getLogger(__name__)

EXTENSIONS = {
    "image/png": ".png",
    "image/jpeg": ".jpg",
}


class UploadService:
    """
    Service for photo files.

    Example:
        uploads = UploadService("uploads/")
        name = uploads.save(content, "image/png")  # "3f2a...e1.png"
        uploads.remove(name)
    """

    def __init__(self, root: str | os.PathLike):
        self.root = Path(root)

    def ensure_root(self) -> bool:
        """
        Create the upload directory if it doesn't exist.

        Failures are logged, not raised; the API still serves everything
        except photo uploads.

        Returns:
            True if the directory exists afterwards
        """
        if self.root.is_dir():
            return True

        logger.info(f"Creating upload path for images: {self.root}")
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Couldn't create path {self.root}: {e}")
            return False

        logger.info("Upload path created successfully")
        return True

    def save(self, content: bytes, content_type: str | None) -> str:
        """
        Write a photo to disk.

        Returns:
            Stored file name (relative to the upload directory)

        Raises:
            StorageWriteError: If the file can't be written
        """
        name = f"{uuid4().hex}{EXTENSIONS.get((content_type or '').lower(), '')}"
        path = self.root / name

        try:
            path.write_bytes(content)
        except OSError as e:
            raise StorageWriteError(str(path), str(e)) from e

        logger.info(f"Stored photo {name} ({len(content)} bytes)")
        return name

    def remove(self, name: str | None) -> bool:
        """Delete a stored photo. Returns False if there was nothing to delete."""
        if not name:
            return False

        path = self.root / Path(name).name
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.warning(f"Failed to remove photo {name}: {e}")
            return False

        logger.info(f"Removed photo {name}")
        return True
