"""UI widgets for Canvas Export"""

from .drawing_canvas import DrawingCanvas
from .main_window import MainWindow

__all__ = ['DrawingCanvas', 'MainWindow']
