"""
Directory backed blob storage, used by the command line scripts and for
local runs without the managed backend.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class LocalBlobStore:
    """
    Stores objects as files below ``root``; keys are relative POSIX paths.

    Implements both ``BlobStore`` and ``DocumentStore``. References returned
    by ``put`` are ``file://`` URIs.
    """

    def __init__(self, root: str | Path):
        self.root = Path(root).resolve()

    def _path(self, key: str) -> Path:
        path = (self.root / key).resolve()
        if self.root != path and self.root not in path.parents:
            raise ValueError(f"Storage key escapes the storage root: {key!r}")
        return path

    def get(self, key: str) -> bytes | None:
        path = self._path(key)
        if not path.is_file():
            return None
        return path.read_bytes()

    def put(self, key: str, data: bytes, content_type: str = "application/pdf") -> str:
        path = self._path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        logger.info("Stored %s (%d bytes, %s)", key, len(data), content_type)
        return path.as_uri()
