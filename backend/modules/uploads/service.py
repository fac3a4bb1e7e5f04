"""
Upload relay service.

Streams an incoming file to a scratch file on disk, enforcing the size
cap while streaming, then forwards it to the image host. The scratch
file is removed on every path, including failures.
"""

import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional, Protocol, runtime_checkable

from .client import IImageHost
from .exceptions import FileTooLargeError, NoFileUploadedError
from .models import ImageHostResponse, UploadOptions

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024
DEFAULT_MAX_UPLOAD_SIZE = 10 * 1024 * 1024


@runtime_checkable
class UploadSource(Protocol):
    """Anything with a filename and an async read(size), e.g. UploadFile."""

    filename: Optional[str]

    async def read(self, size: int = -1) -> bytes: ...


def scratch_name(filename: str, now: Optional[float] = None) -> str:
    """<epoch-millis>-<basename>; directory parts of the client name are dropped."""
    millis = int((now if now is not None else time.time()) * 1000)
    basename = Path(filename.replace("\\", "/")).name or "upload"
    return f"{millis}-{basename}"


class UploadService:
    """Relays client uploads to the image host."""

    def __init__(
        self,
        host: IImageHost,
        upload_dir: Path,
        max_size: int = DEFAULT_MAX_UPLOAD_SIZE,
    ):
        self._host = host
        self._upload_dir = Path(upload_dir)
        self._max_size = max_size

    @property
    def max_size(self) -> int:
        return self._max_size

    async def relay(
        self,
        source: Optional[UploadSource],
        options: Optional[UploadOptions] = None,
    ) -> ImageHostResponse:
        """
        Store, forward and clean up one file.

        Raises:
            NoFileUploadedError: If source is None
            FileTooLargeError: If the stream exceeds max_size
            UploadRelayError: If the image host rejects or never answers
        """
        if source is None:
            raise NoFileUploadedError()

        options = options or UploadOptions()
        async with self.scratch_file(source.filename or "upload") as path:
            size = await self._write(source, path)
            logger.info(f"Received {size} bytes into {path.name}")
            return await self._host.upload(path, options)

    @asynccontextmanager
    async def scratch_file(self, filename: str) -> AsyncIterator[Path]:
        """Yield a scratch path that is always deleted on exit."""
        self._upload_dir.mkdir(parents=True, exist_ok=True)
        path = self._upload_dir / scratch_name(filename)
        try:
            yield path
        finally:
            try:
                path.unlink(missing_ok=True)
            except OSError as e:
                logger.error(f"Failed to remove scratch file {path}: {e}")

    async def _write(self, source: UploadSource, path: Path) -> int:
        written = 0
        with path.open("wb") as target:
            while True:
                chunk = await source.read(CHUNK_SIZE)
                if not chunk:
                    break
                written += len(chunk)
                if written > self._max_size:
                    logger.info(f"Rejected upload over {self._max_size} bytes")
                    raise FileTooLargeError(self._max_size)
                target.write(chunk)
        return written
