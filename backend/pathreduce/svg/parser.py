"""Path data parser — SVG ``d`` attribute → Instruction list."""

from __future__ import annotations

import logging
import re

from pathreduce.engine.errors import PathSyntaxError
from pathreduce.engine.instructions import BY_COMMAND, Arc, Instruction, value_fields

logger = logging.getLogger(__name__)

_SEPARATOR_RE = re.compile(r"[\s,]*")
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_FLAG_RE = re.compile(r"[01]")
_COMMAND_RE = re.compile(r"[MmLlHhVvCcSsQqTtAaZz]")
_NUMBER_START = frozenset("0123456789+-.")

# Arc argument positions holding single-character flags
_ARC_FLAG_INDICES = frozenset({3, 4})


class _Scanner:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def skip_separators(self) -> None:
        self.pos = _SEPARATOR_RE.match(self.text, self.pos).end()

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos] if not self.at_end() else ""

    def read(self, pattern: re.Pattern[str], what: str) -> str:
        self.skip_separators()
        match = pattern.match(self.text, self.pos)
        if not match:
            found = repr(self.peek()) if not self.at_end() else "end of path"
            raise PathSyntaxError(f"Expected {what}, found {found}", self.pos)
        self.pos = match.end()
        return match.group(0)


def parse_path(d: str) -> list[Instruction]:
    """Parse path data into instructions, preserving relative/absolute form.

    Supports implicit command repetition, implicit line-to after move-to and
    compact arc flags (``a1 1 0 00 1 1``).
    """
    scanner = _Scanner(d)
    scanner.skip_separators()
    if scanner.at_end():
        return []

    instructions: list[Instruction] = []
    letter = scanner.read(_COMMAND_RE, "command")
    if letter not in "Mm":
        raise PathSyntaxError(
            f"Path must start with a move command, found {letter!r}", scanner.pos - 1
        )

    while True:
        cls = BY_COMMAND[letter.upper()]
        relative = letter.islower()
        arity = len(value_fields(cls))

        if arity == 0:
            instructions.append(cls(relative=relative))
        else:
            while True:
                values = [_read_argument(scanner, cls, i) for i in range(arity)]
                instructions.append(cls(*values, relative=relative))
                scanner.skip_separators()
                if scanner.peek() not in _NUMBER_START:
                    break
                # Extra coordinate pairs after a move are implicit line-tos
                if letter in "Mm":
                    letter = "L" if letter == "M" else "l"
                    cls = BY_COMMAND["L"]

        scanner.skip_separators()
        if scanner.at_end():
            break
        letter = scanner.read(_COMMAND_RE, "command")

    logger.debug("Parsed %d instruction(s) from %d character(s)", len(instructions), len(d))
    return instructions


def _read_argument(scanner: _Scanner, cls: type, index: int) -> float | bool:
    if cls is Arc and index in _ARC_FLAG_INDICES:
        return scanner.read(_FLAG_RE, "arc flag (0 or 1)") == "1"
    return float(scanner.read(_NUMBER_RE, "number"))
