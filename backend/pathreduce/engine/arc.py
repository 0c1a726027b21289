"""Elliptical arc → cubic bézier approximation.

svgpathtools converts the endpoint parameterization to center, radii,
start angle and sweep. The arc is handed over in a frame where the half
chord has length 1, so its squared terms stay in range for any radius.
The sweep is then split into equal segments no wider than the configured
maximum, each approximated by one cubic with control arms of length
4/3·tan(θ/4).
"""

from __future__ import annotations

import logging
import math

from svgpathtools import Arc as SvgArc

from pathreduce.engine.config import ReducerConfig
from pathreduce.utils.geometry import Point, rotate

logger = logging.getLogger(__name__)

# (control1, control2, end) of one cubic segment
CubicSegment = tuple[Point, Point, Point]

# Radii further than this from the half chord (or from each other) are degenerate
_RADIUS_RATIO_LIMIT = 1e50


def arc_to_cubics(
    start: Point,
    rx: float,
    ry: float,
    x_axis_rotation: float,
    large_arc: bool,
    sweep: bool,
    end: Point,
    config: ReducerConfig | None = None,
) -> list[CubicSegment] | None:
    """Approximate an elliptical arc from ``start`` to ``end`` with cubic segments.

    Returns an empty list when the endpoints coincide (the arc draws nothing)
    and ``None`` when the arc is a straight line to ``end``: a zero radius,
    an ellipse flattened to a segment, or radii so large the short arc has
    no measurable bulge. The last segment ends exactly on ``end``.

    Raises:
        ValueError: the long way round a degenerate ellipse was requested,
            which has no finite cubic approximation.
    """
    config = config or ReducerConfig()
    x1, y1 = float(start[0]), float(start[1])
    x2, y2 = float(end[0]), float(end[1])

    half_chord = math.hypot(x2 - x1, y2 - y1) / 2.0
    if 2.0 * half_chord <= config.tolerance:
        return []

    rx = abs(float(rx))
    ry = abs(float(ry))
    if rx == 0 or ry == 0:
        return None

    largest = max(rx, ry)
    if min(rx, ry) / largest < 1.0 / _RADIUS_RATIO_LIMIT:
        return _degenerate(large_arc, "ellipse is too flat")

    # Scale radii up until the ellipse spans the endpoints. Ratios only,
    # so tiny and subnormal radii do not underflow.
    x1p, y1p = rotate((x1 - x2) / 2.0, (y1 - y2) / 2.0, -math.radians(x_axis_rotation))
    needed = math.hypot(x1p / (rx / largest), y1p / (ry / largest))
    if needed > largest:
        rx = needed * (rx / largest)
        ry = needed * (ry / largest)
        largest = needed

    if largest / half_chord > _RADIUS_RATIO_LIMIT:
        return _degenerate(large_arc, "radii are too large")

    mx, my = (x1 + x2) / 2.0, (y1 + y2) / 2.0
    unit_arc = SvgArc(
        complex(x1 - mx, y1 - my) / half_chord,
        complex(rx, ry) / half_chord,
        x_axis_rotation,
        bool(large_arc),
        bool(sweep),
        complex(x2 - mx, y2 - my) / half_chord,
    )
    cx = mx + unit_arc.center.real * half_chord
    cy = my + unit_arc.center.imag * half_chord
    rx = unit_arc.radius.real * half_chord
    ry = unit_arc.radius.imag * half_chord
    theta = math.radians(unit_arc.theta)
    delta = math.radians(unit_arc.delta)

    max_segment = math.radians(config.arc_max_segment_degrees)
    count = max(1, math.ceil(abs(delta) / max_segment - 1e-9))
    step = delta / count
    arm = 4.0 / 3.0 * math.tan(step / 4.0)

    cos_phi = math.cos(unit_arc.phi)
    sin_phi = math.sin(unit_arc.phi)

    def to_user(ux: float, uy: float) -> Point:
        ex, ey = rx * ux, ry * uy
        return (cx + ex * cos_phi - ey * sin_phi, cy + ex * sin_phi + ey * cos_phi)

    segments: list[CubicSegment] = []
    for i in range(count):
        a = theta + i * step
        b = a + step
        cos_a, sin_a = math.cos(a), math.sin(a)
        cos_b, sin_b = math.cos(b), math.sin(b)
        c1 = to_user(cos_a - arm * sin_a, sin_a + arm * cos_a)
        c2 = to_user(cos_b + arm * sin_b, sin_b - arm * cos_b)
        segments.append((c1, c2, to_user(cos_b, sin_b)))

    # Pin the final endpoint to the declared one
    c1, c2, _ = segments[-1]
    segments[-1] = (c1, c2, (x2, y2))

    logger.debug("Arc %s → %s: %d cubic segment(s), sweep %.1f°", start, end, count, unit_arc.delta)
    return segments


def _degenerate(large_arc: bool, reason: str) -> None:
    if large_arc:
        raise ValueError(f"Cannot approximate large arc: {reason}")
    logger.debug("Treating arc as a straight line: %s", reason)
    return None
