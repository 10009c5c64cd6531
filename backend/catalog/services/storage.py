"""Disk storage for uploaded product photos."""

import logging
import time
import uuid
from pathlib import Path

from fastapi import UploadFile

from catalog.core.config import settings
from catalog.core.errors import ValidationError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


class PhotoStorage:
    def __init__(
        self,
        directory: str | Path = settings.UPLOAD_DIR,
        max_upload_mb: int = settings.MAX_UPLOAD_SIZE_MB,
        allowed_types: list[str] | None = None,
    ):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)
        self.max_upload_mb = max_upload_mb
        self.max_upload_bytes = max_upload_mb * 1024 * 1024
        self.allowed_types = set(allowed_types or settings.ALLOWED_PHOTO_TYPES)

    def validate(self, file: UploadFile) -> None:
        """Reject a file before anything is written, based on its headers."""
        if file.content_type not in self.allowed_types:
            raise ValidationError(f"File type not allowed. Use: {', '.join(sorted(self.allowed_types))}")
        if file.size and file.size > self.max_upload_bytes:
            raise ValidationError(f"File too large. Max {self.max_upload_mb}MB")

    async def save(self, file: UploadFile) -> str:
        """Store an upload and return the filename assigned to it."""
        self.validate(file)

        # Read in chunks to limit memory usage
        chunks = []
        total_size = 0
        while True:
            chunk = await file.read(CHUNK_SIZE)
            if not chunk:
                break
            total_size += len(chunk)
            if total_size > self.max_upload_bytes:
                raise ValidationError(f"File too large. Max {self.max_upload_mb}MB")
            chunks.append(chunk)

        ext = Path(file.filename).suffix.lower() if file.filename else ".jpg"
        filename = f"{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}{ext}"
        with open(self.directory / filename, "wb") as f:
            f.write(b"".join(chunks))

        logger.info(f"Stored photo {filename} ({total_size} bytes)")
        return filename

    def delete(self, filename: str) -> bool:
        """Remove a stored photo. A missing or undeletable file is logged, not raised."""
        path = self.directory / Path(filename).name
        try:
            path.unlink()
        except FileNotFoundError:
            logger.warning(f"Photo file already gone: {path}")
            return False
        except OSError as e:
            logger.warning(f"Failed to delete photo {path}: {e}")
            return False
        return True
