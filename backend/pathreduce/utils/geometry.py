"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

Point = tuple[float, float]


def reflect(point: Point, about: Point) -> Point:
    """Reflect ``point`` through ``about``: 2·about − point."""
    return (2 * about[0] - point[0], 2 * about[1] - point[1])


def rotate(x: float, y: float, radians: float) -> Point:
    """Rotate (x, y) counter-clockwise around the origin."""
    cos_r = math.cos(radians)
    sin_r = math.sin(radians)
    return (x * cos_r - y * sin_r, x * sin_r + y * cos_r)
