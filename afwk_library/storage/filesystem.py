"""Filesystem access used by the validator and scaffolder.

Contract:
- exists() never raises; any stat failure means "does not exist"
- create_directory() is idempotent and creates missing parents
- write_file() never overwrites: it fails with FileExistsError instead
- delete_recursive() is for maintenance only, never for reconciliation
"""

import asyncio
import logging
import shutil
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class FileSystem(Protocol):
    """Filesystem operations the structure core depends on."""

    def exists(self, path: str) -> bool: ...

    def create_directory(self, path: str) -> None: ...

    def write_file(self, path: str, data: bytes) -> None: ...

    def delete_recursive(self, path: str) -> None: ...


class LocalFileSystem:
    """FileSystem backed by the local disk."""

    def exists(self, path: str) -> bool:
        try:
            Path(path).stat()
        except (OSError, ValueError):
            return False
        return True

    def create_directory(self, path: str) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def write_file(self, path: str, data: bytes) -> None:
        # "x" mode refuses to touch a file that already exists
        with open(path, "xb") as f:
            f.write(data)

    def delete_recursive(self, path: str) -> None:
        target = Path(path)
        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(target)
        else:
            target.unlink()


async def probe(fs: FileSystem, path: str) -> bool:
    """Check whether a path exists without ever raising.

    Args:
        fs: Filesystem to probe
        path: Absolute path

    Returns:
        True if the path exists, False if it is absent or could not be checked
    """
    try:
        return await asyncio.to_thread(fs.exists, path)
    except Exception as e:
        logger.debug(f"Probe failed for {path}, treating as missing: {e}")
        return False
