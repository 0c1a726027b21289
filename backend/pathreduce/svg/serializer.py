"""Write instruction lists back to SVG path data."""

from __future__ import annotations

import re
from collections.abc import Sequence

from pathreduce.engine.config import ReducerConfig
from pathreduce.engine.instructions import Arc, Instruction, command_letter, value_fields
from pathreduce.engine.reduce import reduce_instructions
from pathreduce.svg.parser import parse_path

_TRAILING_ZEROS_RE = re.compile(r"^(-?\d*\.(\d*[1-9])?)0*$")
_TRAILING_DOT_RE = re.compile(r"\.$")


def format_number(value: float, precision: int | None = None) -> str:
    """Format a coordinate: fixed decimals when ``precision`` is set, no trailing zeros."""
    text = f"{value:.{precision}f}" if precision is not None else repr(float(value))
    if "e" in text or "E" in text:
        return text
    text = _TRAILING_ZEROS_RE.sub(r"\1", text)
    text = _TRAILING_DOT_RE.sub("", text)
    if text in ("-0", ""):
        return "0"
    return text


def serialize_instructions(instructions: Sequence[Instruction], precision: int | None = None) -> str:
    """Serialize instructions as ``d`` path data, one command letter per instruction."""
    parts: list[str] = []
    for instruction in instructions:
        tokens = [command_letter(instruction)]
        for name in value_fields(instruction):
            value = getattr(instruction, name)
            if isinstance(instruction, Arc) and name in ("large_arc_flag", "sweep_flag"):
                tokens.append("1" if value else "0")
            else:
                tokens.append(format_number(value, precision))
        parts.append(" ".join(tokens))
    return " ".join(parts)


def reduce_path(d: str, precision: int | None = None, config: ReducerConfig | None = None) -> str:
    """Parse ``d``, reduce it to M/L/C/Q/Z and serialize the result."""
    return serialize_instructions(reduce_instructions(parse_path(d), config), precision)
