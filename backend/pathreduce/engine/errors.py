"""Exceptions raised by the path tooling."""

from __future__ import annotations

from typing import Any


class PathReduceError(Exception):
    """Base class for all path tooling errors."""


class InvalidInstructionError(PathReduceError, ValueError):
    """An input instruction is of an unsupported kind or carries bad coordinates."""

    def __init__(self, index: int, instruction: Any, reason: str) -> None:
        self.index = index
        self.instruction = instruction
        self.reason = reason
        super().__init__(f"Invalid instruction at index {index} ({instruction!r}): {reason}")


class ReductionInvariantError(PathReduceError, RuntimeError):
    """Normalization met an unhandled kind or let a non-reduced instruction through. Always a bug."""


class PathSyntaxError(PathReduceError, ValueError):
    """A path string could not be parsed."""

    def __init__(self, message: str, position: int) -> None:
        self.position = position
        super().__init__(f"{message} at position {position}")
