"""Tests for the raster (PNG) renderer"""

import numpy as np
import pytest
from PyQt6.QtGui import QImage

from canvas_export.core.models import BLACK, WHITE, Color, Point, Stroke
from canvas_export.renderers.raster_renderer import encode_png, render_raster
from canvas_export.utils.image_utils import qimage_to_array

PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'


@pytest.mark.parametrize('size', [128, 1024])
def test_image_has_exact_size(qapp, size):
    image = render_raster([], size, size, WHITE)
    assert (image.width(), image.height()) == (size, size)


def test_white_background_is_opaque(qapp):
    pixels = qimage_to_array(render_raster([], 128, 128, WHITE))
    assert (pixels == 255).all()


def test_background_alpha_ignored(qapp):
    pixels = qimage_to_array(render_raster([], 64, 64, Color(0, 0, 255, 10)))
    assert (pixels[..., 3] == 255).all()
    assert (pixels[..., 2] == 255).all()


def test_transparent_background(qapp):
    pixels = qimage_to_array(render_raster([], 128, 128, None))
    assert (pixels[..., 3] == 0).all()


def test_stroke_pixels(qapp, diagonal_stroke):
    pixels = qimage_to_array(render_raster([diagonal_stroke], 256, 256, WHITE))

    # On the diagonal: covered by the 3.072 px black line
    assert tuple(pixels[128, 128]) == (0, 0, 0, 255)
    # Far from the line: untouched background
    assert tuple(pixels[230, 20]) == (255, 255, 255, 255)
    assert tuple(pixels[5, 250]) == (255, 255, 255, 255)


def test_stroke_on_transparent_background(qapp, diagonal_stroke):
    pixels = qimage_to_array(render_raster([diagonal_stroke], 256, 256, None))
    assert pixels[128, 128, 3] == 255
    assert pixels[20, 230, 3] == 0


def test_later_strokes_paint_over(qapp):
    red = Color(255, 0, 0)
    line = (Point(0.0, 0.5), Point(1.0, 0.5))
    strokes = [Stroke(line, 0.05, BLACK), Stroke(line, 0.05, red)]

    pixels = qimage_to_array(render_raster(strokes, 128, 128, WHITE))
    assert tuple(pixels[64, 64]) == (255, 0, 0, 255)


def test_width_scales_with_target(qapp):
    stroke = Stroke((Point(0.0, 0.5), Point(1.0, 0.5)), width_fraction=0.1)

    for size in (128, 512):
        column = qimage_to_array(render_raster([stroke], size, size, WHITE))[:, size // 2, 0]
        dark_rows = int((column < 128).sum())
        assert dark_rows == pytest.approx(0.1 * size, abs=2)


def test_degenerate_strokes_are_skipped(qapp):
    blank = qimage_to_array(render_raster([], 128, 128, WHITE))
    degenerate = [Stroke(()), Stroke((Point(0.5, 0.5),))]

    pixels = qimage_to_array(render_raster(degenerate, 128, 128, WHITE))
    assert np.array_equal(pixels, blank)


def test_invalid_size(qapp):
    with pytest.raises(ValueError):
        render_raster([], 0, 128)


def test_encode_png(qapp, diagonal_stroke):
    image = render_raster([diagonal_stroke], 128, 128, None)
    data = encode_png(image)

    assert data.startswith(PNG_SIGNATURE)
    decoded = QImage.fromData(data, 'PNG')
    assert (decoded.width(), decoded.height()) == (128, 128)
    assert np.array_equal(qimage_to_array(decoded)[..., 3], qimage_to_array(image)[..., 3])
