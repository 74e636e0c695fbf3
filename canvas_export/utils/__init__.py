"""Utility functions for Canvas Export"""

from .color_utils import rgb_to_hex, hex_to_rgb, hex_to_rgba
from .image_utils import qimage_to_array, load_image_as_qimage
from .logging_config import LoggingConfig

# File utilities
from .file_utils import (
    partial_path_for,
    atomic_write,
    ensure_parent_exists,
    claim_unique_path,
)

__all__ = [
    'rgb_to_hex',
    'hex_to_rgb',
    'hex_to_rgba',
    'qimage_to_array',
    'load_image_as_qimage',
    'LoggingConfig',
    'partial_path_for',
    'atomic_write',
    'ensure_parent_exists',
    'claim_unique_path',
]
