"""PathReduce — reduce SVG path instructions to M, L, C, Q and Z."""

from pathreduce.engine import (
    Arc,
    ClosePath,
    CubicCurve,
    HorizontalLine,
    Instruction,
    InvalidInstructionError,
    Line,
    Move,
    PathReduceError,
    PathSyntaxError,
    QuadraticCurve,
    ReducedInstruction,
    ReducerConfig,
    ReductionInvariantError,
    SmoothCubicCurve,
    SmoothQuadraticCurve,
    VerticalLine,
    reduce_instructions,
)
from pathreduce.svg.parser import parse_path
from pathreduce.svg.serializer import reduce_path, serialize_instructions

__version__ = "0.1.0"

__all__ = [
    "Arc",
    "ClosePath",
    "CubicCurve",
    "HorizontalLine",
    "Instruction",
    "InvalidInstructionError",
    "Line",
    "Move",
    "PathReduceError",
    "PathSyntaxError",
    "QuadraticCurve",
    "ReducedInstruction",
    "ReducerConfig",
    "ReductionInvariantError",
    "SmoothCubicCurve",
    "SmoothQuadraticCurve",
    "VerticalLine",
    "parse_path",
    "reduce_instructions",
    "reduce_path",
    "serialize_instructions",
]
