import asyncio
import logging
import secrets
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

UPLOAD_SUFFIX = ".json"

logger = logging.getLogger("jqlens.storage")


class TempFileStore:
    def __init__(self, upload_dir: str | Path):
        self.upload_dir = Path(upload_dir)

    def ensure_directory(self) -> Path:
        # Anything other than "already exists" is fatal for serving uploads.
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        return self.upload_dir

    def generate_name(self, field_name: str) -> str:
        millis = time.time_ns() // 1_000_000
        return f"{field_name}-{millis}-{secrets.token_hex(4)}{UPLOAD_SUFFIX}"

    def path_for(self, name: str) -> Path:
        return self.upload_dir / Path(name).name

    async def write(self, name: str, payload: bytes) -> Path:
        """Store ``payload``; a failed or cancelled write leaves no file behind."""
        destination = self.path_for(name)
        writing = asyncio.ensure_future(asyncio.to_thread(destination.write_bytes, payload))
        try:
            await asyncio.shield(writing)
        except BaseException:
            await asyncio.shield(self._discard(writing, destination))
            raise
        return destination

    async def _discard(self, writing: asyncio.Future, destination: Path) -> None:
        # The worker thread outlives cancellation; removing earlier would race its open().
        await asyncio.wait([writing])
        await self.delete(destination)

    async def delete(self, path: str | Path) -> bool:
        """Remove ``path``; returns False when removal failed. Never raises."""
        try:
            await asyncio.to_thread(Path(path).unlink, missing_ok=True)
        except OSError as exc:
            logger.error("Error deleting file %s: %s", path, exc)
            return False
        logger.debug("Deleted temporary file %s", path)
        return True

    @asynccontextmanager
    async def hold(self, path: str | Path) -> AsyncIterator[Path]:
        """Tie a stored file to the enclosing block; it is deleted on every exit path."""
        try:
            yield Path(path)
        finally:
            await self.delete(path)
