"""PathReduce instruction engine."""

from pathreduce.engine.config import ReducerConfig
from pathreduce.engine.errors import (
    InvalidInstructionError,
    PathReduceError,
    PathSyntaxError,
    ReductionInvariantError,
)
from pathreduce.engine.instructions import (
    Arc,
    ClosePath,
    CubicCurve,
    HorizontalLine,
    Instruction,
    Line,
    Move,
    QuadraticCurve,
    ReducedInstruction,
    SmoothCubicCurve,
    SmoothQuadraticCurve,
    VerticalLine,
)
from pathreduce.engine.normalize import normalize_instructions
from pathreduce.engine.reduce import reduce_instructions
from pathreduce.engine.simplify import remove_arc_smooth_hv_instructions

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
    "normalize_instructions",
    "reduce_instructions",
    "remove_arc_smooth_hv_instructions",
]
