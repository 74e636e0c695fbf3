"""
Image utilities for inspecting rendered exports
"""

from pathlib import Path
from typing import Optional

import numpy as np
from PyQt6.QtGui import QImage


def qimage_to_array(image: QImage) -> np.ndarray:
    """
    Copy a QImage into an RGBA numpy array.

    Args:
        image: Any-format QImage

    Returns:
        uint8 array of shape (height, width, 4), non-premultiplied RGBA
    """
    # Convert QImage to RGBA format first to ensure consistent handling
    if image.format() != QImage.Format.Format_RGBA8888:
        image = image.convertToFormat(QImage.Format.Format_RGBA8888)

    width = image.width()
    height = image.height()
    ptr = image.constBits()
    ptr.setsize(image.sizeInBytes())
    rows = np.array(ptr, dtype=np.uint8).reshape((height, image.bytesPerLine()))
    return rows[:, :width * 4].reshape((height, width, 4)).copy()


def load_image_as_qimage(image_path: Path) -> Optional[QImage]:
    """
    Load image file as QImage

    Returns:
        QImage or None if load failed
    """
    if not image_path.exists():
        return None

    image = QImage(str(image_path))
    if image.isNull():
        return None
    return image


__all__ = [
    'qimage_to_array',
    'load_image_as_qimage',
]
