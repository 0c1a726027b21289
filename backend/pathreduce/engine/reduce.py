"""Reduce arbitrary path instructions to the M/L/C/Q/Z subset."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pathreduce.engine.config import ReducerConfig
from pathreduce.engine.instructions import Instruction, ReducedInstruction
from pathreduce.engine.normalize import normalize_instructions
from pathreduce.engine.simplify import remove_arc_smooth_hv_instructions

logger = logging.getLogger(__name__)


def reduce_instructions(
    instructions: Sequence[Instruction],
    config: ReducerConfig | None = None,
) -> list[ReducedInstruction]:
    """Reduce a path so it only consists of absolute M, L, C, Q and Z instructions.

    Relative coordinates are resolved, H/V become L, S/T get their reflected
    control points, and arcs are approximated with cubics. The result draws
    the same shape as the input.

    Raises:
        InvalidInstructionError: an input instruction has an unsupported type
            or a missing/non-finite coordinate.
    """
    normalized = normalize_instructions(instructions, config)
    reduced = remove_arc_smooth_hv_instructions(normalized)
    logger.debug("Reduced %d instruction(s) to %d", len(instructions), len(reduced))
    return reduced
