"""
Snapshot Writer - Persist rendered icons as files for drag-and-drop.

Every write goes to its own fresh sub-directory so concurrent exports
never collide, while the file keeps a readable name for the drop target.
"""

import re
import tempfile
from pathlib import Path

from loguru import logger
from PIL import Image

from symbolic.errors import WriteFailure

_EXTENSIONS = {
    "PNG": "png",
    "JPEG": "jpg",
    "TIFF": "tiff",
    "WEBP": "webp",
    "BMP": "bmp",
}

_UNSAFE_CHARS = re.compile(r'[\\/:*?"<>|\x00-\x1f]')


def safe_filename(name: str) -> str:
    """Strip characters that are not allowed in file names."""
    cleaned = _UNSAFE_CHARS.sub("", name).strip(" .")
    return cleaned or "Icon"


class SnapshotWriter:
    """Write PIL images to uniquely named files."""

    def __init__(self, image_format: str = "PNG"):
        image_format = image_format.upper()
        if image_format not in _EXTENSIONS:
            raise ValueError(f"Unsupported image format: {image_format}")
        self.image_format = image_format

    @property
    def extension(self) -> str:
        return _EXTENSIONS[self.image_format]

    def write(self, image: Image.Image, suggested_name: str, directory) -> Path:
        """
        Save an image under directory.

        Args:
            image: Rendered icon
            suggested_name: File name without extension (e.g. "Icon 16pt@2x")
            directory: Destination directory, created if missing

        Returns:
            Path of the written file

        Raises:
            WriteFailure: The file could not be written
        """
        directory = Path(directory)
        try:
            directory.mkdir(parents=True, exist_ok=True)
            folder = Path(tempfile.mkdtemp(prefix="symbolic-", dir=directory))
            path = folder / f"{safe_filename(suggested_name)}.{self.extension}"
            if self.image_format == "JPEG" and image.mode != "RGB":
                image = image.convert("RGB")
            image.save(path, format=self.image_format)
        except OSError as e:
            raise WriteFailure(f"Could not write {suggested_name} to {directory}: {e}") from e

        logger.debug(f"Wrote snapshot {path}")
        return path
