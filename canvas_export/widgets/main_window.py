"""
MainWindow - Drawing canvas with export controls

Layout:
    +------------------------------------------+
    |        ( White ) ( Transparent )         |
    +------------------------------------------+
    |  Size: [256 x 256 px v]   Clear PNG SVG  |
    +------------------------------------------+
    |              DrawingCanvas               |
    +------------------------------------------+
    |  StatusBar                               |
    +------------------------------------------+
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QComboBox,
    QRadioButton, QButtonGroup, QPushButton, QStatusBar, QLabel
)
from PyQt6.QtCore import Qt

from ..config import Config
from ..core.models import BackgroundMode, ExportFormat, ExportTarget
from ..services.export_service import ExportResult, ExportService
from .drawing_canvas import DrawingCanvas

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Main application window

    Owns the canvas (and through it the Drawing) and the export service.
    """

    STATUS_TIMEOUT_MS = 3000

    def __init__(self, parent=None, export_service: Optional[ExportService] = None):
        super().__init__(parent)

        # Services (injectable for testing)
        self._export_service = export_service or ExportService(parent=self)

        # Export state
        self._export_size = Config.DEFAULT_EXPORT_SIZE
        self._background = BackgroundMode.WHITE

        # Setup window
        self._setup_window()
        self._create_widgets()
        self._create_layout()
        self._connect_signals()

    def _setup_window(self):
        """Configure window properties"""

        self.setWindowTitle(f"{Config.APP_NAME} {Config.APP_VERSION}")
        self.resize(Config.DEFAULT_WINDOW_WIDTH, Config.DEFAULT_WINDOW_HEIGHT)

    def _create_widgets(self):
        """Create UI widgets"""

        # Background mode (segmented choice)
        self._white_radio = QRadioButton("White")
        self._transparent_radio = QRadioButton("Transparent")
        self._white_radio.setChecked(True)
        self._background_group = QButtonGroup(self)
        self._background_group.addButton(self._white_radio)
        self._background_group.addButton(self._transparent_radio)

        # Export size
        self._size_combo = QComboBox()
        for size in Config.EXPORT_SIZES:
            self._size_combo.addItem(f"{size} × {size} px", size)
        self._size_combo.setCurrentIndex(Config.EXPORT_SIZES.index(self._export_size))

        # Actions
        self._clear_button = QPushButton("Clear")
        self._export_png_button = QPushButton("Export PNG")
        self._export_svg_button = QPushButton("Export SVG")

        # Canvas
        self._canvas = DrawingCanvas()
        self._canvas.set_canvas_size(Config.get_preview_size(self._export_size))

        # Status bar
        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)
        self._status_bar.showMessage("Ready")

    def _create_layout(self):
        """Create window layout"""

        background_row = QHBoxLayout()
        background_row.addStretch(1)
        background_row.addWidget(self._white_radio)
        background_row.addWidget(self._transparent_radio)
        background_row.addStretch(1)

        action_row = QHBoxLayout()
        action_row.addWidget(QLabel("Size:"))
        action_row.addWidget(self._size_combo)
        action_row.addStretch(1)
        action_row.addWidget(self._clear_button)
        action_row.addWidget(self._export_png_button)
        action_row.addWidget(self._export_svg_button)

        layout = QVBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(12)
        layout.addLayout(background_row)
        layout.addLayout(action_row)
        layout.addWidget(self._canvas, 1, Qt.AlignmentFlag.AlignCenter)

        central = QWidget()
        central.setLayout(layout)
        self.setCentralWidget(central)

    def _connect_signals(self):
        """Connect widget and service signals"""

        self._white_radio.toggled.connect(self._on_background_toggled)
        self._size_combo.currentIndexChanged.connect(self._on_size_changed)
        self._clear_button.clicked.connect(self._on_clear)
        self._export_png_button.clicked.connect(lambda: self._request_export(ExportFormat.PNG))
        self._export_svg_button.clicked.connect(lambda: self._request_export(ExportFormat.SVG))

        self._export_service.export_finished.connect(self._on_export_finished)
        self._export_service.export_failed.connect(self._on_export_failed)

    # ==================== Properties ====================

    @property
    def canvas(self) -> DrawingCanvas:
        return self._canvas

    @property
    def export_size(self) -> int:
        return self._export_size

    @property
    def background(self) -> BackgroundMode:
        return self._background

    def export_target(self) -> ExportTarget:
        """Current size and background as an export target."""
        return ExportTarget(self._export_size, self._background)

    # ==================== Slots ====================

    def _on_background_toggled(self, white_checked: bool):
        self._background = BackgroundMode.WHITE if white_checked else BackgroundMode.TRANSPARENT

    def _on_size_changed(self, index: int):
        size = self._size_combo.itemData(index)
        if size is None:
            return
        self._export_size = size
        self._canvas.set_canvas_size(Config.get_preview_size(size))

    def _on_clear(self):
        self._canvas.clear()
        self._status_bar.showMessage("Canvas cleared", self.STATUS_TIMEOUT_MS)

    def _request_export(self, fmt: ExportFormat):
        target = self.export_target()
        logger.info(f"Export requested: {fmt.name} {target.size}px, background={target.background.value}")
        self._export_service.request_export(self._canvas.drawing, fmt, target)

    def _on_export_finished(self, result: ExportResult):
        self._status_bar.showMessage(result.message, self.STATUS_TIMEOUT_MS)

    def _on_export_failed(self, fmt_name: str, error: str):
        logger.error(f"{fmt_name} export failed: {error}")
        self._status_bar.showMessage("Save failed", self.STATUS_TIMEOUT_MS)


__all__ = ['MainWindow']
