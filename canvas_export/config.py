"""
Global configuration for Canvas Export

Export sizes, stroke defaults, densification threshold and storage locations.
"""

import os
import sys
from pathlib import Path
from typing import Final, Dict, Optional, Tuple


class Config:
    """Central configuration class for all application settings"""

    # Application metadata
    APP_NAME: Final[str] = "Canvas Export"
    APP_VERSION: Final[str] = "1.0.0"

    # Paths
    APP_ROOT: Final[Path] = Path(__file__).parent

    # Export settings
    EXPORT_SIZES: Final[Tuple[int, ...]] = (128, 256, 512, 1024)
    DEFAULT_EXPORT_SIZE: Final[int] = 256

    # On-screen canvas size (logical px) for each export size
    PREVIEW_SIZES: Final[Dict[int, int]] = {
        128: 220,
        256: 300,
        512: 360,
        1024: 400,
    }

    # Stroke defaults (fixed at stroke start)
    DEFAULT_WIDTH_FRACTION: Final[float] = 0.012  # of min(width, height)
    DEFAULT_STROKE_COLOR: Final[str] = "#000000"

    # Max distance in output pixels between consecutive rendered points
    MAX_GAP_PX: Final[float] = 1.5

    # File naming: canvas_<size>_<timestamp>.<ext>
    FILENAME_PREFIX: Final[str] = "canvas"
    TIMESTAMP_FORMAT: Final[str] = "%Y%m%d_%H%M%S"

    # Storage
    PICTURES_SUBFOLDER: Final[str] = "Canvas"
    EXPORT_DIR_ENV: Final[str] = "CANVAS_EXPORT_DIR"
    LOG_FOLDER_NAME: Final[str] = "logs"

    # Window settings
    DEFAULT_WINDOW_WIDTH: Final[int] = 520
    DEFAULT_WINDOW_HEIGHT: Final[int] = 620

    @classmethod
    def get_user_data_dir(cls) -> Path:
        """
        Get user data directory.

        Uses system AppData/Local (Windows) or .local/share (Linux).
        A 'portable.txt' next to the package keeps everything local.
        """
        portable_flag = cls.APP_ROOT.parent / 'portable.txt'
        if portable_flag.exists():
            user_dir = cls.APP_ROOT.parent / 'data'
        else:
            if sys.platform == 'win32':
                base_path = Path(os.environ.get('LOCALAPPDATA', os.path.expanduser('~')))
                user_dir = base_path / 'CanvasExport'
            elif sys.platform == 'darwin':
                user_dir = Path.home() / 'Library' / 'Application Support' / 'CanvasExport'
            else:
                # Linux / Unix
                user_dir = Path.home() / '.local' / 'share' / 'CanvasExport'

        user_dir.mkdir(parents=True, exist_ok=True)
        return user_dir

    @classmethod
    def get_log_dir(cls) -> Path:
        """Get the folder for log files."""
        return cls.get_user_data_dir() / cls.LOG_FOLDER_NAME

    @classmethod
    def _get_export_override(cls) -> Optional[Path]:
        value = os.environ.get(cls.EXPORT_DIR_ENV, '').strip()
        return Path(value).expanduser() if value else None

    @classmethod
    def get_pictures_dir(cls) -> Path:
        """Get the folder PNG exports are written to (Pictures/Canvas)."""
        override = cls._get_export_override()
        if override is not None:
            return override
        return Path.home() / 'Pictures' / cls.PICTURES_SUBFOLDER

    @classmethod
    def get_downloads_dir(cls) -> Path:
        """Get the folder SVG exports are written to (Downloads)."""
        override = cls._get_export_override()
        if override is not None:
            return override
        return Path.home() / 'Downloads'

    @classmethod
    def is_valid_export_size(cls, size: int) -> bool:
        return size in cls.EXPORT_SIZES

    @classmethod
    def get_preview_size(cls, export_size: int) -> int:
        """On-screen canvas size for an export size (largest preview otherwise)."""
        return cls.PREVIEW_SIZES.get(export_size, max(cls.PREVIEW_SIZES.values()))


__all__ = ['Config']
