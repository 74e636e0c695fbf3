"""
Logging setup for Canvas Export

The root logger gets a DEBUG log file in the user data folder and a
console handler; modules log through logging.getLogger(__name__).
"""
import logging
import sys
from pathlib import Path
from typing import Optional

FILE_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
FILE_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
CONSOLE_FORMAT = '[%(levelname)s] %(message)s'


class LoggingConfig:
    """Configures the root logger once per process."""

    LOG_FILE_NAME = "canvas_export.log"

    _initialized = False
    _log_file_path: Optional[Path] = None

    @classmethod
    def setup_logging(cls, log_dir: Path, console_level: int = logging.INFO):
        """
        Attach the file and console handlers (later calls do nothing).

        An unusable log folder only costs the file handler; console
        logging still works.
        """
        if cls._initialized:
            return

        root = logging.getLogger()
        root.setLevel(logging.DEBUG)

        file_handler = cls._create_file_handler(log_dir)
        if file_handler is not None:
            root.addHandler(file_handler)

        console = logging.StreamHandler(sys.stdout)
        console.setLevel(console_level)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        root.addHandler(console)

        cls._initialized = True

    @classmethod
    def _create_file_handler(cls, log_dir: Path) -> Optional[logging.Handler]:
        path = log_dir / cls.LOG_FILE_NAME
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(path, encoding='utf-8')
        except OSError as e:
            cls._log_file_path = None
            print(f"[Canvas Export] Log file disabled, cannot write to {log_dir}: {e}", file=sys.stderr)
            return None

        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATE_FORMAT))
        cls._log_file_path = path
        return handler

    @classmethod
    def get_log_file_path(cls) -> Optional[Path]:
        """Current log file, or None when file logging is disabled."""
        return cls._log_file_path


__all__ = ['LoggingConfig']
