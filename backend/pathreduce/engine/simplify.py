"""Simplification stage — guarantees only M, L, C, Q and Z survive."""

from __future__ import annotations

from collections.abc import Sequence

from pathreduce.engine.errors import ReductionInvariantError
from pathreduce.engine.instructions import REDUCED_TYPES, Instruction, ReducedInstruction


def remove_arc_smooth_hv_instructions(
    instructions: Sequence[Instruction],
) -> list[ReducedInstruction]:
    """Check that normalization left nothing but absolute reduced instructions.

    A, S, T, H and V (or any relative instruction) at this point means the
    normalization stage is broken, so this raises instead of repairing.
    """
    reduced: list[ReducedInstruction] = []
    for index, instruction in enumerate(instructions):
        if not isinstance(instruction, REDUCED_TYPES):
            raise ReductionInvariantError(
                f"Instruction {type(instruction).__name__} at index {index} survived normalization"
            )
        if instruction.relative:
            raise ReductionInvariantError(
                f"Relative instruction {instruction.command.lower()} at index {index} survived normalization"
            )
        reduced.append(instruction)
    return reduced
