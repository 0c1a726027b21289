"""Path instruction types — one frozen dataclass per SVG path command.

``Instruction`` is the closed union of every drawing command a path may
contain. ``ReducedInstruction`` is the subset left after reduction:
M, L, C, Q and Z in absolute coordinates.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import ClassVar, Union


@dataclass(frozen=True)
class Move:
    x: float
    y: float
    relative: bool = False

    command: ClassVar[str] = "M"


@dataclass(frozen=True)
class Line:
    x: float
    y: float
    relative: bool = False

    command: ClassVar[str] = "L"


@dataclass(frozen=True)
class HorizontalLine:
    x: float
    relative: bool = False

    command: ClassVar[str] = "H"


@dataclass(frozen=True)
class VerticalLine:
    y: float
    relative: bool = False

    command: ClassVar[str] = "V"


@dataclass(frozen=True)
class CubicCurve:
    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float
    relative: bool = False

    command: ClassVar[str] = "C"


@dataclass(frozen=True)
class SmoothCubicCurve:
    x2: float
    y2: float
    x: float
    y: float
    relative: bool = False

    command: ClassVar[str] = "S"


@dataclass(frozen=True)
class QuadraticCurve:
    x1: float
    y1: float
    x: float
    y: float
    relative: bool = False

    command: ClassVar[str] = "Q"


@dataclass(frozen=True)
class SmoothQuadraticCurve:
    x: float
    y: float
    relative: bool = False

    command: ClassVar[str] = "T"


@dataclass(frozen=True)
class Arc:
    rx: float
    ry: float
    x_axis_rotation: float
    large_arc_flag: bool
    sweep_flag: bool
    x: float
    y: float
    relative: bool = False

    command: ClassVar[str] = "A"


@dataclass(frozen=True)
class ClosePath:
    relative: bool = False

    command: ClassVar[str] = "Z"


Instruction = Union[
    Move,
    Line,
    HorizontalLine,
    VerticalLine,
    CubicCurve,
    SmoothCubicCurve,
    QuadraticCurve,
    SmoothQuadraticCurve,
    Arc,
    ClosePath,
]

ReducedInstruction = Union[Move, Line, CubicCurve, QuadraticCurve, ClosePath]

INSTRUCTION_TYPES: tuple[type, ...] = (
    Move,
    Line,
    HorizontalLine,
    VerticalLine,
    CubicCurve,
    SmoothCubicCurve,
    QuadraticCurve,
    SmoothQuadraticCurve,
    Arc,
    ClosePath,
)

REDUCED_TYPES: tuple[type, ...] = (Move, Line, CubicCurve, QuadraticCurve, ClosePath)

# Command letter (upper case) → instruction class
BY_COMMAND: dict[str, type] = {cls.command: cls for cls in INSTRUCTION_TYPES}


def value_fields(instruction: Instruction | type) -> list[str]:
    """Names of the numeric/flag fields of an instruction, in SVG argument order."""
    return [f.name for f in fields(instruction) if f.name != "relative"]


def instruction_values(instruction: Instruction) -> list[float]:
    """SVG argument values of an instruction, flags as 0.0/1.0."""
    return [float(getattr(instruction, name)) for name in value_fields(instruction)]


def command_letter(instruction: Instruction) -> str:
    """SVG command letter, lower case for relative instructions."""
    letter = instruction.command
    return letter.lower() if instruction.relative else letter
