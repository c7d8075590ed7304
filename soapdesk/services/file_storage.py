"""Local disk storage for uploaded document bytes."""

import re
import uuid
from pathlib import Path
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from soapdesk.config import settings
from soapdesk.core.logging import logger
from soapdesk.shared.exceptions import BadRequestException, InternalServerException, NotFoundException


_SAFE_NAME_RE = re.compile(r"[^A-Za-z0-9._-]")


def sanitize_filename(original_name: Optional[str]) -> str:
    """
    Return a filesystem-safe version of ``original_name``.

    Only the final path component is kept and anything outside a small
    whitelist becomes an underscore. Empty results fall back to a random hex
    name.
    """
    raw_name = Path(original_name or "").name.strip()
    sanitized = _SAFE_NAME_RE.sub("_", raw_name).strip("._")
    if not sanitized:
        return uuid.uuid4().hex
    return sanitized[:128]


class FileStorage:
    """
    Stores blobs under ``root/<owner>/<key>``.

    Keys are generated here, so callers never pass user-controlled paths.
    """

    def __init__(self, root: Optional[str] = None):
        self._root = Path(root) if root else None

    @property
    def root(self) -> Path:
        return (self._root or Path(settings.UPLOAD_DIR)).resolve()

    def _path_for(self, key: str) -> Path:
        destination = (self.root / key).resolve()
        if self.root not in destination.parents:
            raise BadRequestException("Invalid storage key")
        return destination

    async def save(self, owner_id: str, original_name: Optional[str], content: bytes) -> str:
        """
        Write ``content`` and return its storage key.

        Raises:
            BadRequestException: The content is empty or over the size limit.
        """
        if not content:
            raise BadRequestException("Uploaded file is empty", field="file")

        if len(content) > settings.max_upload_bytes:
            raise BadRequestException(
                f"File size exceeds {settings.MAX_UPLOAD_SIZE_MB}MB limit",
                field="file",
            )

        key = f"{sanitize_filename(owner_id)}/{uuid.uuid4().hex}_{sanitize_filename(original_name)}"
        destination = self._path_for(key)

        def _write() -> None:
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_bytes(content)

        try:
            await run_in_threadpool(_write)
        except OSError as e:
            logger.error(f"Failed to store upload {key}: {e}")
            raise InternalServerException("Failed to store uploaded file")

        logger.info(f"Stored {len(content)} bytes at {key}")
        return key

    async def read(self, key: str) -> bytes:
        path = self._path_for(key)
        if not path.is_file():
            logger.warning(f"Stored file missing: {key}")
            raise NotFoundException("File not found")
        return await run_in_threadpool(path.read_bytes)

    async def delete(self, key: str) -> bool:
        """Remove a blob. A blob that is already gone counts as deleted."""
        path = self._path_for(key)
        try:
            await run_in_threadpool(path.unlink)
        except FileNotFoundError:
            logger.warning(f"File not found for deletion: {key}")
        logger.info(f"Deleted stored file: {key}")
        return True


file_storage = FileStorage()
