"""Tests for canvas_export.core.densify"""

import math

import numpy as np
import pytest

from canvas_export.core.densify import densify, to_pixel_polyline, stroke_pixel_width
from canvas_export.core.models import Point, Stroke


def _max_gap_px(points, width, height):
    return max(
        math.hypot((b.x - a.x) * width, (b.y - a.y) * height)
        for a, b in zip(points, points[1:])
    )


def test_short_inputs_returned_unchanged():
    assert densify([], 256, 256) == []
    assert densify([Point(0.3, 0.4)], 256, 256) == [Point(0.3, 0.4)]


def test_close_points_get_no_insertions():
    points = [Point(0.5, 0.5), Point(0.502, 0.5)]  # ~0.5 px apart at 256
    assert densify(points, 256, 256) == points


def test_diagonal_point_count():
    points = [Point(0.1, 0.1), Point(0.9, 0.9)]
    out = densify(points, 256, 256)

    distance = math.hypot(0.8 * 256, 0.8 * 256)
    expected_steps = math.floor(distance / 1.5)
    assert len(out) == expected_steps + 2
    assert out[0] == points[0]
    assert out[-1] == points[-1]


def test_inserted_points_are_colinear_and_ordered():
    out = densify([Point(0.1, 0.1), Point(0.9, 0.9)], 512, 512)

    for p in out:
        assert p.x == pytest.approx(p.y)
    xs = [p.x for p in out]
    assert xs == sorted(xs)


def test_inserted_points_lie_on_their_segment():
    points = [Point(0.1, 0.2), Point(0.8, 0.3), Point(0.4, 0.9), Point(0.45, 0.1)]
    width, height = 640, 160
    out = densify(points, width, height)

    segment = 0
    last_t = 0.0
    for p in out[1:]:
        a, b = points[segment], points[segment + 1]
        if p == b:
            segment += 1
            last_t = 0.0
            continue

        # Pixel-space vectors a->b and a->p
        abx, aby = (b.x - a.x) * width, (b.y - a.y) * height
        apx, apy = (p.x - a.x) * width, (p.y - a.y) * height
        assert abx * apy - aby * apx == pytest.approx(0.0, abs=1e-6)

        t = (apx * abx + apy * aby) / (abx ** 2 + aby ** 2)
        assert last_t < t < 1.0
        last_t = t

    assert segment == len(points) - 1
    assert _max_gap_px(out, width, height) <= 1.5


def test_gap_never_exceeds_threshold():
    points = [Point(0.0, 0.0), Point(1.0, 0.2), Point(0.3, 0.9), Point(0.31, 0.9)]
    for size in (128, 256, 512, 1024):
        out = densify(points, size, size)
        assert _max_gap_px(out, size, size) <= 1.5


def test_input_points_kept_in_order():
    points = [Point(0.0, 0.0), Point(0.5, 0.0), Point(0.5, 0.5)]
    out = densify(points, 256, 256)

    indices = [out.index(p) for p in points]
    assert indices == sorted(indices)
    assert out.count(points[1]) == 1


def test_idempotent():
    points = [Point(0.05, 0.7), Point(0.6, 0.1), Point(0.95, 0.95)]
    once = densify(points, 1024, 1024)
    twice = densify(once, 1024, 1024)
    assert len(twice) == len(once)
    assert twice == once


def test_larger_targets_get_more_points():
    points = [Point(0.1, 0.5), Point(0.9, 0.5)]
    counts = [len(densify(points, size, size)) for size in (128, 256, 512, 1024)]
    assert counts == sorted(counts)
    assert counts[0] < counts[-1]


def test_axes_scaled_independently():
    horizontal = [Point(0.0, 0.5), Point(1.0, 0.5)]
    vertical = [Point(0.5, 0.0), Point(0.5, 1.0)]

    # 600 px wide, 60 px tall
    assert len(densify(horizontal, 600, 60)) == math.floor(600 / 1.5) + 2
    assert len(densify(vertical, 600, 60)) == math.floor(60 / 1.5) + 2


def test_custom_gap():
    points = [Point(0.0, 0.0), Point(1.0, 0.0)]
    assert len(densify(points, 100, 100, max_gap_px=10.0)) == 12


@pytest.mark.parametrize('width, height, gap', [
    (0, 256, 1.5),
    (256, -1, 1.5),
    (256, 256, 0.0),
    (256, 256, -2.0),
])
def test_invalid_arguments(width, height, gap):
    with pytest.raises(ValueError):
        densify([Point(0, 0), Point(1, 1)], width, height, gap)


def test_pixel_polyline_scales_by_target():
    polyline = to_pixel_polyline([Point(0.1, 0.1), Point(0.9, 0.9)], 256, 256)

    assert polyline.shape[1] == 2
    np.testing.assert_allclose(polyline[0], [25.6, 25.6])
    np.testing.assert_allclose(polyline[-1], [230.4, 230.4])


def test_pixel_polyline_empty():
    assert to_pixel_polyline([], 128, 128).shape == (0, 2)


def test_stroke_pixel_width_uses_smaller_side():
    stroke = Stroke((Point(0, 0), Point(1, 1)), width_fraction=0.01)
    assert stroke_pixel_width(stroke, 400, 200) == pytest.approx(2.0)
    assert stroke_pixel_width(stroke, 256, 256) == pytest.approx(2.56)
