"""
Export writers - persist finished PNG images and SVG documents

A writer is handed finished output and reports success or failure once.
Nothing is retried. A failed write never leaves a partial file behind.

File structure (defaults):
    ~/Pictures/Canvas/canvas_256_20260101_120000_000.png
    ~/Downloads/canvas_256_20260101_120000_000.svg
"""

import logging
from pathlib import Path
from typing import Optional

from PyQt6.QtGui import QImage

from ..config import Config
from ..renderers.raster_renderer import encode_png
from ..utils.file_utils import atomic_write, claim_unique_path, ensure_parent_exists

logger = logging.getLogger(__name__)


class ExportWriter:
    """Storage boundary for exports."""

    def save_raster(self, image: QImage, file_name: str) -> Optional[Path]:
        """
        Save an image as PNG.

        Returns:
            Path of the written file, or None on failure
        """
        raise NotImplementedError("Subclasses must implement save_raster()")

    def save_vector(self, svg: str, file_name: str) -> bool:
        """
        Save SVG document text.

        Returns:
            True if saved successfully
        """
        raise NotImplementedError("Subclasses must implement save_vector()")


class FileExportWriter(ExportWriter):
    """
    Writes exports to folders on disk.

    PNG files go to the pictures folder, SVG files to the downloads folder
    (see Config), unless explicit folders are given.
    """

    def __init__(self, pictures_dir: Optional[Path] = None, vector_dir: Optional[Path] = None):
        self._pictures_dir = Path(pictures_dir) if pictures_dir else None
        self._vector_dir = Path(vector_dir) if vector_dir else None

    @property
    def pictures_dir(self) -> Path:
        return self._pictures_dir or Config.get_pictures_dir()

    @property
    def vector_dir(self) -> Path:
        return self._vector_dir or Config.get_downloads_dir()

    def save_raster(self, image: QImage, file_name: str) -> Optional[Path]:
        if image.isNull():
            logger.error(f"Refusing to save empty image as {file_name}")
            return None

        try:
            path = self._write_new_file(self.pictures_dir, file_name, encode_png(image))
        except (OSError, ValueError) as e:
            logger.error(f"Error saving PNG {file_name}: {e}")
            return None

        logger.info(f"PNG saved: {path} ({image.width()}x{image.height()})")
        return path

    def save_vector(self, svg: str, file_name: str) -> bool:
        try:
            path = self._write_new_file(self.vector_dir, file_name, svg.encode('utf-8'))
        except (OSError, ValueError) as e:
            logger.error(f"Error saving SVG {file_name}: {e}")
            return False

        logger.info(f"SVG saved: {path}")
        return True

    @staticmethod
    def _write_new_file(folder: Path, file_name: str, data: bytes) -> Path:
        """Write data under a freshly claimed name in folder; nothing is left on failure."""
        if not ensure_parent_exists(folder / file_name):
            raise OSError(f"Export folder unavailable: {folder}")

        path = claim_unique_path(folder / file_name)
        try:
            with atomic_write(path) as tmp_path:
                tmp_path.write_bytes(data)
        except BaseException:
            path.unlink(missing_ok=True)
            raise
        return path


__all__ = [
    'ExportWriter',
    'FileExportWriter',
]
