"""
Bookstore Backend — Upload Storage Service
============================================

What:  Streams uploaded images to the upload directory and resolves stored
       files for serving.
Who:   Called by POST /upload and GET /uploads/{path}.

Storage model:
    uploads/
    ├── cover.jpg                 ← client filename (directory parts stripped)
    └── image-<uuid4>.jpg         ← generated when the client sent no name

    Files are written under the client's name, so a second upload with the
    same name replaces the first. There is no size limit and no content-type
    check; the client only ever sends camera/gallery images.

Security:
    Only the base name of the client filename is used, and served paths are
    resolved and checked to stay inside the upload directory.
"""

import logging
import uuid
from pathlib import Path
from typing import Optional

import aiofiles
from starlette.datastructures import UploadFile

from bookstore.exceptions import FileStorageError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

# Streaming chunk size: bounded memory regardless of upload size
CHUNK_SIZE = 1024 * 1024

UPLOAD_URL_PREFIX = "/uploads"


class FileService:
    """
    Manages the upload directory.

    Args:
        upload_root: Directory receiving uploads; created on first use.
    """

    def __init__(self, upload_root: str):
        self.upload_root = Path(upload_root).resolve()

    def ensure_root(self) -> Path:
        """Create the upload directory if absent (idempotent)."""
        self.upload_root.mkdir(parents=True, exist_ok=True)
        return self.upload_root

    def target_name(self, filename: Optional[str]) -> str:
        """
        Name under which an upload is stored.

        Keeps only the final path component of the client filename; falls back
        to ``image-<uuid4>.jpg`` when there is nothing usable left.
        """
        name = Path(filename).name if filename else ""
        if name in ("", ".", ".."):
            name = f"image-{uuid.uuid4()}.jpg"
        return name

    async def store_upload(self, upload: UploadFile) -> str:
        """
        Stream one uploaded file to disk.

        Returns:
            The URL path the file is served under, e.g. ``/uploads/cover.jpg``.

        Raises:
            FileStorageError: the file could not be written (→ 400)
        """
        name = self.target_name(upload.filename)
        path = self.upload_root / name
        written = 0

        try:
            self.ensure_root()
            async with aiofiles.open(path, "wb") as out:
                while True:
                    chunk = await upload.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    await out.write(chunk)
                    written += len(chunk)
        except OSError as e:
            logger.error("Failed to store upload at %s: %s", path, str(e))
            raise FileStorageError(context={"path": str(path), "os_error": str(e)})
        finally:
            await upload.close()

        logger.info("Upload stored: %s (%d bytes)", name, written)
        return f"{UPLOAD_URL_PREFIX}/{name}"

    def resolve(self, relative_path: str) -> Path:
        """
        Map a served path back onto the upload directory.

        Raises:
            ValidationError: the path escapes the upload directory (→ 400)
            NotFoundError: no such file (→ 404)
        """
        full_path = (self.upload_root / relative_path).resolve()
        if not full_path.is_relative_to(self.upload_root):
            raise ValidationError(message="Invalid file path", field="path")
        if not full_path.is_file():
            raise NotFoundError(resource="file", resource_id=relative_path)
        return full_path
