"""Tests for arc → cubic approximation."""

from __future__ import annotations

import math

import numpy as np
import pytest

from pathreduce.engine.arc import arc_to_cubics
from pathreduce.engine.config import ReducerConfig


def _cubic_points(start, segment, n=20):
    (c1x, c1y), (c2x, c2y), (ex, ey) = segment
    sx, sy = start
    t = np.linspace(0.0, 1.0, n)
    mt = 1 - t
    x = mt**3 * sx + 3 * mt**2 * t * c1x + 3 * mt * t**2 * c2x + t**3 * ex
    y = mt**3 * sy + 3 * mt**2 * t * c1y + 3 * mt * t**2 * c2y + t**3 * ey
    return np.column_stack([x, y])


def _all_points(start, segments):
    chunks = []
    current = start
    for seg in segments:
        chunks.append(_cubic_points(current, seg))
        current = seg[2]
    return np.vstack(chunks)


def test_half_circle_stays_on_circle():
    segments = arc_to_cubics((0, 0), 5, 5, 0, False, True, (10, 0))
    pts = _all_points((0, 0), segments)
    radii = np.hypot(pts[:, 0] - 5, pts[:, 1])
    assert np.all(np.abs(radii - 5) < 1e-2)


def test_sweep_flag_selects_side():
    up = _all_points((0, 0), arc_to_cubics((0, 0), 5, 5, 0, False, True, (10, 0)))
    down = _all_points((0, 0), arc_to_cubics((0, 0), 5, 5, 0, False, False, (10, 0)))
    assert up[:, 1].min() == pytest.approx(-5, abs=1e-2)
    assert down[:, 1].max() == pytest.approx(5, abs=1e-2)


def test_large_arc_flag_selects_longer_arc():
    small = arc_to_cubics((0, 0), 5, 5, 0, False, True, (5, 5))
    large = arc_to_cubics((0, 0), 5, 5, 0, True, True, (5, 5))
    assert len(small) == 1
    assert len(large) == 3


def test_end_point_is_exact():
    end = (13.37, -4.2)
    segments = arc_to_cubics((1.5, 2.5), 7, 3, 25, True, False, end)
    assert segments[-1][2] == end


def test_first_segment_starts_tangent_at_start():
    start = (0.0, 0.0)
    segments = arc_to_cubics(start, 5, 5, 0, False, True, (10, 0))
    # First control point sits straight above the start point (vertical tangent)
    c1 = segments[0][0]
    assert c1[0] == pytest.approx(start[0], abs=1e-9)
    assert c1[1] < 0


def test_ellipse_points_satisfy_equation():
    segments = arc_to_cubics((0, 0), 10, 5, 0, False, True, (20, 0))
    pts = _all_points((0, 0), segments)
    values = ((pts[:, 0] - 10) / 10) ** 2 + (pts[:, 1] / 5) ** 2
    assert np.all(np.abs(values - 1) < 1e-2)


def test_rotated_ellipse_endpoints():
    segments = arc_to_cubics((0, 0), 8, 4, 45, False, True, (6, 6))
    assert segments[-1][2] == (6, 6)
    pts = _all_points((0, 0), segments)
    assert np.all(np.isfinite(pts))


def test_radii_scaled_up_when_too_small():
    scaled = arc_to_cubics((0, 0), 1, 1, 0, False, True, (10, 0))
    exact = arc_to_cubics((0, 0), 5, 5, 0, False, True, (10, 0))
    assert np.allclose(np.array(scaled), np.array(exact))


@pytest.mark.parametrize("radius", [1e-160, 1e-200, 5e-324])
def test_tiny_radii_scale_up_without_underflow(radius):
    tiny = arc_to_cubics((0, 0), radius, radius, 0, False, True, (10, 0))
    exact = arc_to_cubics((0, 0), 5, 5, 0, False, True, (10, 0))
    assert np.all(np.isfinite(np.array(tiny)))
    assert np.allclose(np.array(tiny), np.array(exact))


def test_tiny_elliptical_radii_keep_their_ratio():
    tiny = arc_to_cubics((0, 0), 2e-200, 1e-200, 0, False, True, (20, 0))
    exact = arc_to_cubics((0, 0), 10, 5, 0, False, True, (20, 0))
    assert np.allclose(np.array(tiny), np.array(exact))


def test_huge_radii_small_arc_is_a_line():
    assert arc_to_cubics((0, 0), 1e200, 1e200, 0, False, True, (10, 0)) is None


def test_huge_radii_large_arc_is_rejected():
    with pytest.raises(ValueError, match="large arc"):
        arc_to_cubics((0, 0), 1e200, 1e200, 0, True, True, (10, 0))


def test_moderately_large_radius_stays_finite():
    segments = arc_to_cubics((0, 0), 1e6, 1e6, 0, False, True, (10, 0))
    pts = _all_points((0, 0), segments)
    assert np.all(np.isfinite(pts))
    assert np.abs(pts[:, 1]).max() < 1e-3


def test_flat_ellipse_small_arc_is_a_line():
    assert arc_to_cubics((0, 0), 5, 1e-300, 0, False, True, (10, 0)) is None


def test_zero_radius_is_a_line():
    assert arc_to_cubics((0, 0), 0, 5, 0, True, True, (10, 0)) is None


def test_negative_radii_use_absolute_value():
    negative = arc_to_cubics((0, 0), -5, -5, 0, False, True, (10, 0))
    positive = arc_to_cubics((0, 0), 5, 5, 0, False, True, (10, 0))
    assert np.allclose(np.array(negative), np.array(positive))


def test_coincident_endpoints_draw_nothing():
    assert arc_to_cubics((4, 4), 5, 5, 0, True, True, (4, 4)) == []


def test_segment_count_follows_max_angle():
    config = ReducerConfig(arc_max_segment_degrees=30.0)
    segments = arc_to_cubics((0, 0), 5, 5, 0, False, True, (10, 0), config)
    assert len(segments) == 6


def test_segment_sweeps_are_equal():
    segments = arc_to_cubics((0, 0), 5, 5, 0, True, True, (5, 5))
    ends = [(0.0, 0.0)] + [seg[2] for seg in segments]
    chords = [math.dist(a, b) for a, b in zip(ends, ends[1:])]
    assert max(chords) - min(chords) < 1e-6
