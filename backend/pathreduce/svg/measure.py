"""Geometry measurement over reduced paths — facade over svgpathtools + numpy.

Only the five reduced instruction kinds are accepted; run
``reduce_instructions`` first.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from svgpathtools import CubicBezier, Line as LineSegment, Path, QuadraticBezier

from pathreduce.engine.errors import InvalidInstructionError
from pathreduce.engine.instructions import (
    REDUCED_TYPES,
    ClosePath,
    CubicCurve,
    Line,
    Move,
    QuadraticCurve,
    ReducedInstruction,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoundingBox:
    x_min: float
    y_min: float
    x_max: float
    y_max: float

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min


def to_svgpathtools_path(instructions: Sequence[ReducedInstruction]) -> Path:
    """Build an svgpathtools ``Path``; Z adds a closing line when away from the subpath start."""
    segments, _ = _build(instructions)
    return Path(*segments)


def get_length(instructions: Sequence[ReducedInstruction]) -> float:
    """Total drawn length of a reduced path."""
    segments, _ = _build(instructions)
    return float(sum(seg.length() for seg in segments))


def get_bounding_box(instructions: Sequence[ReducedInstruction]) -> BoundingBox:
    """Tight bounding box of a reduced path, including points only moved to."""
    segments, move_points = _build(instructions)
    xs: list[float] = [p.real for p in move_points]
    ys: list[float] = [p.imag for p in move_points]
    for seg in segments:
        xmin, xmax, ymin, ymax = seg.bbox()
        xs.extend((xmin, xmax))
        ys.extend((ymin, ymax))
    if not xs:
        return BoundingBox(0.0, 0.0, 0.0, 0.0)
    return BoundingBox(float(min(xs)), float(min(ys)), float(max(xs)), float(max(ys)))


def sample_points(
    instructions: Sequence[ReducedInstruction], samples_per_segment: int = 12
) -> NDArray[np.float64]:
    """Sample each drawn segment at evenly spaced parameters. Returns an Nx2 array."""
    if samples_per_segment < 2:
        raise ValueError(f"samples_per_segment must be at least 2, got {samples_per_segment}")
    segments, _ = _build(instructions)
    if not segments:
        return np.empty((0, 2))

    ts = np.linspace(0.0, 1.0, samples_per_segment)
    points = [seg.point(t) for seg in segments for t in ts]
    return np.array([[p.real, p.imag] for p in points], dtype=np.float64)


def _build(instructions: Sequence[ReducedInstruction]) -> tuple[list, list[complex]]:
    """Convert to svgpathtools segments; also return every subpath's move point."""
    segments: list = []
    move_points: list[complex] = []
    current = 0j
    start = 0j

    for index, ins in enumerate(instructions):
        if not isinstance(ins, REDUCED_TYPES) or ins.relative:
            raise InvalidInstructionError(index, ins, "measurement requires reduced instructions")

        if isinstance(ins, Move):
            current = start = complex(ins.x, ins.y)
            move_points.append(current)
        elif isinstance(ins, Line):
            end = complex(ins.x, ins.y)
            segments.append(LineSegment(current, end))
            current = end
        elif isinstance(ins, CubicCurve):
            end = complex(ins.x, ins.y)
            segments.append(
                CubicBezier(current, complex(ins.x1, ins.y1), complex(ins.x2, ins.y2), end)
            )
            current = end
        elif isinstance(ins, QuadraticCurve):
            end = complex(ins.x, ins.y)
            segments.append(QuadraticBezier(current, complex(ins.x1, ins.y1), end))
            current = end
        elif isinstance(ins, ClosePath):
            if current != start:
                segments.append(LineSegment(current, start))
            current = start

    logger.debug("Built %d segment(s) from %d instruction(s)", len(segments), len(instructions))
    return segments, move_points
