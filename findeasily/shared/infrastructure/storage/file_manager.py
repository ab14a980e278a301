# 📄 File: findeasily/shared/infrastructure/storage/file_manager.py

# 🧭 Purpose (Layman Explanation):
# This file is the site's photo cabinet: it checks that an uploaded picture really is a
# picture of a sensible size, then files it away in a folder for the right user or listing.

# 🧪 Purpose (Technical Summary):
# Local-filesystem file service. Validates uploads (extension, size, Pillow decodability and
# dimensions) and writes them under UPLOAD_DIR/users/<user_id>/ or UPLOAD_DIR/listings/<listing_id>/
# with collision-free generated names. Blocking disk I/O runs in a worker thread.

# 🔗 Dependencies:
# - PIL: Image validation
# - asyncio: Offloading disk writes
# - shared.utils.validators: filename sanitizing

# 🔄 Connected Modules / Calls From:
# Called by: user_management.application.handlers (profile picture),
# listing_management.application.handlers (listing photos), main.py (construction)

import asyncio
import io
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional
from uuid import uuid4

from PIL import Image, UnidentifiedImageError

from findeasily.shared.core.exceptions import (
    FileStorageError,
    FileTooLargeError,
    InvalidFileTypeError
)
from findeasily.shared.utils.logging import get_logger
from findeasily.shared.utils.validators import sanitize_filename

logger = get_logger(__name__)

MIN_IMAGE_DIMENSION = 10
MAX_IMAGE_DIMENSION = 10000


@dataclass(frozen=True)
class UploadedFile:
    """Bytes of one multipart upload, detached from the web framework."""
    filename: str
    content: bytes
    content_type: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.content


class FileService:
    """
    Stores user pictures and listing photos on the local filesystem.

    Returned paths are relative to the upload directory and use forward
    slashes, e.g. ``listings/<listing_id>/3f2c...e1.jpg``.
    """

    def __init__(
        self,
        upload_dir: str,
        max_size: int = 10 * 1024 * 1024,
        allowed_extensions: Optional[Iterable[str]] = None
    ):
        self.upload_dir = Path(upload_dir)
        self.max_size = max_size
        self.allowed_extensions = {
            ext.lower() if ext.startswith('.') else f".{ext.lower()}"
            for ext in (allowed_extensions or ('.jpg', '.jpeg', '.png', '.webp', '.gif'))
        }

    async def store_user_picture(self, user_id: str, filename: str, data: bytes) -> str:
        """
        Validate and store a profile picture.

        Args:
            user_id: Owner of the picture
            filename: Client-side filename, only its extension is kept
            data: Raw file bytes

        Returns:
            str: Stored path relative to the upload directory
        """
        return await self._store(f"users/{user_id}", filename, data)

    async def store_listing_photo(self, listing_id: str, filename: str, data: bytes) -> str:
        """Validate and store a listing photo, returning its relative path."""
        return await self._store(f"listings/{listing_id}", filename, data)

    def resolve(self, relative_path: str) -> Path:
        return self.upload_dir / relative_path

    async def _store(self, folder: str, filename: str, data: bytes) -> str:
        extension = self._validate_file(data, filename)
        self._validate_image(data, filename)

        relative_path = f"{folder}/{uuid4().hex}{extension}"
        target = self.resolve(relative_path)

        try:
            await asyncio.to_thread(self._write, target, data)
        except OSError as e:
            logger.error(f"Failed to write {relative_path}: {e}")
            raise FileStorageError(
                f"Could not store file '{filename}'",
                file_path=relative_path,
                operation="write"
            ) from e

        logger.info(f"Stored file {relative_path}", size=len(data))
        return relative_path

    @staticmethod
    def _write(target: Path, data: bytes) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)

    def _validate_file(self, data: bytes, filename: str) -> str:
        """Check size and extension, returning the normalized extension."""
        safe_name = sanitize_filename(filename or '')

        if not data:
            raise InvalidFileTypeError(safe_name, sorted(self.allowed_extensions))

        if len(data) > self.max_size:
            raise FileTooLargeError(safe_name, len(data), self.max_size)

        extension = Path(safe_name).suffix.lower()
        if extension not in self.allowed_extensions:
            raise InvalidFileTypeError(safe_name, sorted(self.allowed_extensions))

        return extension

    def _validate_image(self, data: bytes, filename: str) -> None:
        """Validate image file integrity and dimensions."""
        try:
            with Image.open(io.BytesIO(data)) as img:
                img.verify()

            # verify() leaves the image unusable
            with Image.open(io.BytesIO(data)) as img:
                width, height = img.size
        except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as e:
            logger.debug(f"Rejected undecodable image {filename}: {e}")
            raise InvalidFileTypeError(filename, sorted(self.allowed_extensions)) from e

        if min(width, height) < MIN_IMAGE_DIMENSION or max(width, height) > MAX_IMAGE_DIMENSION:
            logger.debug(f"Rejected image {filename} with size {width}x{height}")
            raise InvalidFileTypeError(filename, sorted(self.allowed_extensions))
