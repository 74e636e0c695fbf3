"""
ExportService - render a drawing snapshot and hand the result to a writer

Pattern: Background export with QRunnable workers
Each request snapshots the committed strokes on the calling (UI) thread,
then renders and writes on a QThreadPool worker. Results come back through
Qt signals. Exports are single-shot: not cancellable, never retried.
"""

import logging
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence, Union

from PyQt6.QtCore import QObject, QRunnable, QThreadPool, pyqtSignal
from PyQt6.QtGui import QImage

from ..config import Config
from ..core.drawing import Drawing
from ..core.models import ExportFormat, ExportTarget, Stroke
from ..renderers.raster_renderer import render_raster
from ..renderers.svg_renderer import render_svg
from .export_writer import ExportWriter, FileExportWriter

logger = logging.getLogger(__name__)


def generate_export_filename(size: int, fmt: ExportFormat, now: Optional[datetime] = None) -> str:
    """
    Generate a suggested filename for an export.

    Format: canvas_{size}_{yyyyMMdd_HHmmss_SSS}.{ext}
    Only numeric date fields are used, so the name does not depend on locale.

    Args:
        size: Export size in pixels
        fmt: Export format (provides the extension)
        now: Timestamp to use (defaults to the current time)
    """
    now = now or datetime.now()
    timestamp = f"{now.strftime(Config.TIMESTAMP_FORMAT)}_{now.microsecond // 1000:03d}"
    return f"{Config.FILENAME_PREFIX}_{size}_{timestamp}.{fmt.extension}"


@dataclass(frozen=True)
class ExportResult:
    """Outcome of one export request."""
    format: ExportFormat
    target: ExportTarget
    file_name: str
    success: bool
    path: Optional[Path] = None
    elapsed_ms: float = 0.0

    @property
    def message(self) -> str:
        """Short status text for the UI."""
        if self.success:
            return f"{self.format.name} saved"
        return "Save failed"


class ExportSignals(QObject):
    """Signals for ExportTask"""

    export_finished = pyqtSignal(object)  # ExportResult
    export_failed = pyqtSignal(str, str)  # format name, error_message


class ExportTask(QRunnable):
    """
    Background task rendering and saving one export.

    Usage:
        task = ExportTask(service, strokes, ExportFormat.PNG, target)
        task.signals.export_finished.connect(on_done)
        QThreadPool.globalInstance().start(task)
    """

    def __init__(
        self,
        service: 'ExportService',
        strokes: Sequence[Stroke],
        fmt: ExportFormat,
        target: ExportTarget
    ):
        super().__init__()
        self.service = service
        self.strokes = tuple(strokes)
        self.fmt = fmt
        self.target = target
        self.signals = ExportSignals()

    def run(self):
        """Execute export task"""
        try:
            result = self.service.export(self.strokes, self.fmt, self.target)
        except Exception as e:
            logger.exception(f"{self.fmt.name} export failed")
            self.signals.export_failed.emit(self.fmt.name, f"Export error: {e}")
            return

        self.signals.export_finished.emit(result)


class ExportService(QObject):
    """
    Coordinates rendering and writing of exports.

    Features:
    - Synchronous export() for callers already off the UI thread
    - request_export() snapshots a Drawing and runs in the thread pool
    - One finished/failed signal per request
    """

    export_finished = pyqtSignal(object)  # ExportResult
    export_failed = pyqtSignal(str, str)  # format name, error_message

    def __init__(
        self,
        writer: Optional[ExportWriter] = None,
        thread_pool: Optional[QThreadPool] = None,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self._writer = writer or FileExportWriter()
        self._thread_pool = thread_pool or QThreadPool.globalInstance()

    @property
    def writer(self) -> ExportWriter:
        return self._writer

    @property
    def thread_pool(self) -> QThreadPool:
        return self._thread_pool

    def render(
        self,
        strokes: Sequence[Stroke],
        fmt: ExportFormat,
        target: ExportTarget
    ) -> Union[QImage, str]:
        """Render strokes with the renderer matching the format."""
        if fmt is ExportFormat.PNG:
            return render_raster(strokes, target.width, target.height, target.background_color)
        return render_svg(strokes, target.width, target.height, target.background_color)

    def export(
        self,
        strokes: Sequence[Stroke],
        fmt: ExportFormat,
        target: ExportTarget,
        file_name: Optional[str] = None
    ) -> ExportResult:
        """
        Render and save in the calling thread.

        Args:
            strokes: Snapshot of committed strokes
            fmt: Output format
            target: Size and background
            file_name: Suggested name (generated when omitted)

        Returns:
            ExportResult (success False when the writer failed)
        """
        start_time = time.time()
        file_name = file_name or generate_export_filename(target.size, fmt)

        output = self.render(strokes, fmt, target)
        if fmt is ExportFormat.PNG:
            path = self._writer.save_raster(output, file_name)
            success = path is not None
        else:
            path = None
            success = self._writer.save_vector(output, file_name)

        elapsed_ms = (time.time() - start_time) * 1000
        if success:
            logger.info(f"Exported {len(strokes)} stroke(s) as {file_name} in {elapsed_ms:.1f} ms")
        else:
            logger.warning(f"Export of {file_name} failed")

        return ExportResult(
            format=fmt,
            target=target,
            file_name=file_name,
            success=success,
            path=path,
            elapsed_ms=elapsed_ms
        )

    def request_export(self, drawing: Drawing, fmt: ExportFormat, target: ExportTarget) -> ExportTask:
        """
        Snapshot the drawing and export it in the background.

        Must be called from the thread that authors the drawing.
        """
        task = ExportTask(self, drawing.snapshot(), fmt, target)
        task.signals.export_finished.connect(self.export_finished)
        task.signals.export_failed.connect(self.export_failed)
        self._thread_pool.start(task)
        return task


__all__ = [
    'generate_export_filename',
    'ExportResult',
    'ExportSignals',
    'ExportTask',
    'ExportService',
]
