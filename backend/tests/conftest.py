"""Shared test fixtures."""

from __future__ import annotations

import pytest

from pathreduce.engine.instructions import (
    Arc,
    ClosePath,
    CubicCurve,
    HorizontalLine,
    Line,
    Move,
    QuadraticCurve,
    SmoothCubicCurve,
    SmoothQuadraticCurve,
    VerticalLine,
)


# Sample path data

SQUARE_D = "M0 0 H10 V10 H0 Z"

HALF_CIRCLE_D = "M0 0 A5 5 0 0 1 10 0"

# Relative commands, shorthands and two subpaths, no arcs
MIXED_D = "M10 10 h20 v20 s-10 10 -20 0 t-10 -10 q5 -5 10 0 t10 0 z m5 5 l2 2"

# Lucide "home" outline — arcs with compact flags
HOME_D = (
    "M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999"
    "A2 2 0 0 1 21 10v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"
)


# Instruction sequences

REDUCED_ONLY = [
    Move(0, 0),
    Line(10, 0),
    CubicCurve(10, 5, 5, 10, 0, 10),
    QuadraticCurve(-5, 5, 0, 0),
    ClosePath(),
    Move(20, 20),
    Line(30, 30),
]

EVERY_KIND = [
    Move(0, 0),
    Line(5, 5, relative=True),
    HorizontalLine(20),
    VerticalLine(-5, relative=True),
    CubicCurve(25, 0, 30, 5, 30, 10),
    SmoothCubicCurve(5, 10, 10, 10, relative=True),
    QuadraticCurve(45, 30, 50, 20),
    SmoothQuadraticCurve(10, 0, relative=True),
    Arc(5, 3, 30, True, False, 70, 30),
    ClosePath(relative=True),
    Move(5, 5, relative=True),
    Line(1, 1),
]


@pytest.fixture
def reduced_only() -> list:
    return list(REDUCED_ONLY)


@pytest.fixture
def every_kind() -> list:
    return list(EVERY_KIND)


@pytest.fixture
def mixed_d() -> str:
    return MIXED_D


@pytest.fixture
def home_d() -> str:
    return HOME_D
