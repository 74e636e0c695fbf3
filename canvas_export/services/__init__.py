"""Services for Canvas Export"""

from .export_writer import ExportWriter, FileExportWriter
from .export_service import (
    ExportService,
    ExportTask,
    ExportResult,
    generate_export_filename,
)

__all__ = [
    'ExportWriter',
    'FileExportWriter',
    'ExportService',
    'ExportTask',
    'ExportResult',
    'generate_export_filename',
]
