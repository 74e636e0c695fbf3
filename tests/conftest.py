"""Shared fixtures: a headless QApplication and small stroke builders."""

import os

# Must be set before the QApplication is created
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

import pytest
from PyQt6.QtWidgets import QApplication

from canvas_export.core.models import Point, Stroke


@pytest.fixture(scope='session')
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def diagonal_stroke():
    """Black stroke from (0.1, 0.1) to (0.9, 0.9) at the default width."""
    return Stroke((Point(0.1, 0.1), Point(0.9, 0.9)))


@pytest.fixture
def export_dirs(tmp_path):
    pictures = tmp_path / 'Pictures' / 'Canvas'
    downloads = tmp_path / 'Downloads'
    return pictures, downloads
