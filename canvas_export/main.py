"""
Canvas Export application entry point

    python run.py
    python -m canvas_export.main
    canvas-export            (installed script)
"""

import logging
import sys
from typing import List, Optional

from PyQt6.QtWidgets import QApplication

from .config import Config
from .utils.logging_config import LoggingConfig

logger = logging.getLogger(__name__)


def create_application(argv: List[str]) -> QApplication:
    """QApplication carrying the app name and version."""
    app = QApplication(argv)
    app.setApplicationName(Config.APP_NAME)
    app.setApplicationVersion(Config.APP_VERSION)
    return app


def main(argv: Optional[List[str]] = None) -> int:
    """Run the drawing window until it is closed; returns the exit code."""
    LoggingConfig.setup_logging(Config.get_log_dir())
    logger.info(f"{Config.APP_NAME} {Config.APP_VERSION} starting")
    logger.info(f"Log file: {LoggingConfig.get_log_file_path() or 'disabled'}")
    logger.info(f"PNG folder: {Config.get_pictures_dir()} | SVG folder: {Config.get_downloads_dir()}")

    app = create_application(sys.argv if argv is None else argv)

    # Widgets need the QApplication to exist first
    from .widgets.main_window import MainWindow
    window = MainWindow()
    window.show()

    exit_code = app.exec()
    logger.info(f"{Config.APP_NAME} exited with code {exit_code}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
