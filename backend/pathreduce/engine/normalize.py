"""Normalization stage — absolute coordinates, expanded shorthands, arcs as cubics.

The pen state is an immutable accumulator folded over the instruction
sequence: each step takes the previous ``PenState`` and one instruction and
returns the next state plus the instructions it emits.
"""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Sequence
from dataclasses import dataclass

from pathreduce.engine.arc import arc_to_cubics
from pathreduce.engine.config import ReducerConfig
from pathreduce.engine.errors import InvalidInstructionError, ReductionInvariantError
from pathreduce.engine.instructions import (
    INSTRUCTION_TYPES,
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
    value_fields,
)
from pathreduce.utils.geometry import Point, reflect

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PenState:
    """Cursor state between two instructions."""

    x: float = 0.0
    y: float = 0.0
    # Point the current subpath started at (target of Z)
    start_x: float = 0.0
    start_y: float = 0.0
    # Second control point of the previous C/S, if the previous instruction was one
    cubic_control: Point | None = None
    # Control point of the previous Q/T, if the previous instruction was one
    quadratic_control: Point | None = None

    @property
    def cursor(self) -> Point:
        return (self.x, self.y)

    def resolve(self, x: float, y: float, relative: bool) -> Point:
        """Absolute position of (x, y), relative to the cursor when ``relative``."""
        if relative:
            return (self.x + x, self.y + y)
        return (float(x), float(y))

    def moved_to(self, end: Point) -> PenState:
        return PenState(x=end[0], y=end[1], start_x=self.start_x, start_y=self.start_y)


def validate_instruction(index: int, instruction: object) -> None:
    """Raise ``InvalidInstructionError`` unless ``instruction`` is a well-formed Instruction."""
    if not isinstance(instruction, INSTRUCTION_TYPES):
        raise InvalidInstructionError(
            index, instruction, f"unsupported instruction type {type(instruction).__name__}"
        )
    for name in value_fields(instruction):
        value = getattr(instruction, name, None)
        if value is None:
            raise InvalidInstructionError(index, instruction, f"missing field {name!r}")
        if not isinstance(value, numbers.Real):
            raise InvalidInstructionError(
                index, instruction, f"field {name!r} is not a number: {value!r}"
            )
        if not math.isfinite(value):
            raise InvalidInstructionError(index, instruction, f"field {name!r} is not finite: {value!r}")


def normalize_step(
    state: PenState,
    instruction: Instruction,
    config: ReducerConfig,
) -> tuple[PenState, list[ReducedInstruction]]:
    """Apply one instruction to ``state``; return the new state and what it emits."""
    rel = instruction.relative

    if isinstance(instruction, Move):
        x, y = state.resolve(instruction.x, instruction.y, rel)
        out = instruction if not rel else Move(x, y)
        return PenState(x=x, y=y, start_x=x, start_y=y), [out]

    if isinstance(instruction, Line):
        end = state.resolve(instruction.x, instruction.y, rel)
        out = instruction if not rel else Line(*end)
        return state.moved_to(end), [out]

    if isinstance(instruction, HorizontalLine):
        x = state.x + instruction.x if rel else float(instruction.x)
        end = (x, state.y)
        return state.moved_to(end), [Line(*end)]

    if isinstance(instruction, VerticalLine):
        y = state.y + instruction.y if rel else float(instruction.y)
        end = (state.x, y)
        return state.moved_to(end), [Line(*end)]

    if isinstance(instruction, CubicCurve):
        c1 = state.resolve(instruction.x1, instruction.y1, rel)
        c2 = state.resolve(instruction.x2, instruction.y2, rel)
        end = state.resolve(instruction.x, instruction.y, rel)
        out = instruction if not rel else CubicCurve(*c1, *c2, *end)
        return _after_cubic(state, c2, end), [out]

    if isinstance(instruction, SmoothCubicCurve):
        if state.cubic_control is not None:
            c1 = reflect(state.cubic_control, state.cursor)
        else:
            c1 = state.cursor
        c2 = state.resolve(instruction.x2, instruction.y2, rel)
        end = state.resolve(instruction.x, instruction.y, rel)
        return _after_cubic(state, c2, end), [CubicCurve(*c1, *c2, *end)]

    if isinstance(instruction, QuadraticCurve):
        c = state.resolve(instruction.x1, instruction.y1, rel)
        end = state.resolve(instruction.x, instruction.y, rel)
        out = instruction if not rel else QuadraticCurve(*c, *end)
        return _after_quadratic(state, c, end), [out]

    if isinstance(instruction, SmoothQuadraticCurve):
        if state.quadratic_control is not None:
            c = reflect(state.quadratic_control, state.cursor)
        else:
            c = state.cursor
        end = state.resolve(instruction.x, instruction.y, rel)
        return _after_quadratic(state, c, end), [QuadraticCurve(*c, *end)]

    if isinstance(instruction, Arc):
        end = state.resolve(instruction.x, instruction.y, rel)
        return state.moved_to(end), _expand_arc(state.cursor, instruction, end, config)

    if isinstance(instruction, ClosePath):
        start = (state.start_x, state.start_y)
        return state.moved_to(start), [ClosePath()]

    raise ReductionInvariantError(f"Unhandled instruction type {type(instruction).__name__}")


def normalize_instructions(
    instructions: Sequence[Instruction],
    config: ReducerConfig | None = None,
) -> list[ReducedInstruction]:
    """Run the normalization stage over a whole instruction sequence."""
    config = config or ReducerConfig()
    state = PenState()
    normalized: list[ReducedInstruction] = []
    for index, instruction in enumerate(instructions):
        validate_instruction(index, instruction)
        try:
            state, emitted = normalize_step(state, instruction, config)
        except ValueError as e:
            raise InvalidInstructionError(index, instruction, str(e)) from e
        normalized.extend(emitted)
    return normalized


def _after_cubic(state: PenState, control: Point, end: Point) -> PenState:
    return PenState(
        x=end[0], y=end[1], start_x=state.start_x, start_y=state.start_y, cubic_control=control
    )


def _after_quadratic(state: PenState, control: Point, end: Point) -> PenState:
    return PenState(
        x=end[0], y=end[1], start_x=state.start_x, start_y=state.start_y, quadratic_control=control
    )


def _expand_arc(
    start: Point, arc: Arc, end: Point, config: ReducerConfig
) -> list[ReducedInstruction]:
    segments = arc_to_cubics(
        start,
        arc.rx,
        arc.ry,
        arc.x_axis_rotation,
        bool(arc.large_arc_flag),
        bool(arc.sweep_flag),
        end,
        config,
    )
    if segments is None:
        return [Line(*end)]
    if not segments:
        logger.debug("Dropping arc with coincident endpoints at %s", start)
    return [CubicCurve(*c1, *c2, *seg_end) for c1, c2, seg_end in segments]
