"""Local filesystem storage for article thumbnails.

Storage layout:
    <upload_dir>/thumbnail/<original filename>
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from newsroom.domain.exceptions import DuplicateEntityError

logger = logging.getLogger(__name__)


@dataclass
class UploadedImage:
    """An uploaded image as received from the client."""

    filename: str
    content: bytes


class LocalThumbnailStorage:
    """Infrastructure adapter that writes thumbnail images to disk."""

    def __init__(self, upload_dir: str):
        self._thumbnail_dir = Path(upload_dir) / "thumbnail"
        self._thumbnail_dir.mkdir(parents=True, exist_ok=True)

    @property
    def directory(self) -> Path:
        return self._thumbnail_dir

    async def store_image(self, content: bytes, filename: str) -> str:
        """Write ``content`` to ``<thumbnail dir>/<basename of filename>``.

        An existing file with the same name is never overwritten; that raises
        ``DuplicateEntityError``. Other ``OSError``s propagate.
        """
        name = Path(filename).name
        if not name:
            raise ValueError("Thumbnail filename is empty")

        dest_path = self._thumbnail_dir / name
        try:
            with dest_path.open("xb") as fh:
                fh.write(content)
        except FileExistsError as exc:
            raise DuplicateEntityError("Thumbnail", "path", str(dest_path)) from exc

        logger.info("Stored thumbnail: %s (%d bytes)", dest_path, len(content))
        return str(dest_path)

    async def delete_image(self, stored_path: str) -> bool:
        """Delete a stored thumbnail. Returns False if it was already gone."""
        file_path = Path(stored_path)
        if not file_path.exists():
            return False

        file_path.unlink(missing_ok=True)
        logger.info("Deleted thumbnail from disk: %s", stored_path)
        return True
