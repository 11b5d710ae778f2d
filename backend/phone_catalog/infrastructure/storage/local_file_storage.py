"""Local filesystem storage for uploaded phone images.

Storage layout:
    <upload_dir>/<YYYYMMDD_HHmmssffffff>-<sanitised name>.<ext>

Files are served back as static content under ``/uploads``.
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class StoredFile:
    """Result of storing a single file on disk."""

    filename: str
    file_size: int


def _datetime_stamp() -> str:
    """Return a UTC datetime stamp suitable for filenames: YYYYMMDD_HHmmssffffff."""
    return datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S%f")


def _sanitise(name: str, max_len: int = 80) -> str:
    """Replace non-word characters with underscores and truncate."""
    return re.sub(r"[^\w\-]", "_", name)[:max_len].strip("_") or "unnamed"


class LocalFileStorage:
    """Infrastructure adapter for local file storage."""

    def __init__(self, upload_dir: str):
        self._upload_dir = Path(upload_dir)
        self._upload_dir.mkdir(parents=True, exist_ok=True)

    async def store_file(self, content: bytes, original_name: str) -> StoredFile:
        """Store an uploaded file directly in ``<upload_dir>``.

        The name is prefixed with a UTC datetime stamp to avoid collisions.
        """
        stem = Path(original_name).stem
        suffix = _sanitise(Path(original_name).suffix.lstrip("."), max_len=10)
        stored_name = f"{_datetime_stamp()}-{_sanitise(stem)}"
        if Path(original_name).suffix:
            stored_name = f"{stored_name}.{suffix}"

        dest_path = self._upload_dir / stored_name
        dest_path.write_bytes(content)

        logger.info("Stored file: %s (%d bytes)", dest_path, len(content))

        return StoredFile(
            filename=stored_name,
            file_size=len(content),
        )
