"""Value types and constants for the tapebf engine.

This module defines the instruction alphabet, the structured error value
carried by fatal run failures, the run result returned to callers, and the
end-of-input policies understood by the I/O channel.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# Instruction alphabet
MOVE_RIGHT = '>'
MOVE_LEFT = '<'
INCREMENT = '+'
DECREMENT = '-'
WRITE = '.'
READ = ','
JUMP_IF_ZERO = '['
JUMP_IF_NONZERO = ']'

INSTRUCTIONS = frozenset((
    MOVE_RIGHT, MOVE_LEFT, INCREMENT, DECREMENT,
    WRITE, READ, JUMP_IF_ZERO, JUMP_IF_NONZERO,
))

CELL_MODULUS = 256
DEFAULT_CELL_VALUE = 0
DEFAULT_MAX_TAPE_SIZE = 1 << 20

# Error kinds
TAPE_OVERFLOW = 'TapeOverflow'
TAPE_UNDERFLOW = 'TapeUnderflow'
UNMATCHED_OPEN_BRACKET = 'UnmatchedOpenBracket'
UNMATCHED_CLOSE_BRACKET = 'UnmatchedCloseBracket'


class EofPolicy:
    """What a read instruction stores once the input is exhausted.

    ``MINUS_ONE`` mirrors a C-style ``get()`` that yields -1, which lands in
    an unsigned cell as 255. ``ZERO`` stores 0 and ``UNCHANGED`` leaves the
    cell as it was.
    """
    MINUS_ONE = '-1'
    ZERO = '0'
    UNCHANGED = 'unchanged'

    DEFAULT = MINUS_ONE
    CHOICES = (MINUS_ONE, ZERO, UNCHANGED)

    @staticmethod
    def validate(policy: str) -> str:
        if policy not in EofPolicy.CHOICES:
            raise ValueError(f'unknown eof policy {policy!r}; expected one of {", ".join(EofPolicy.CHOICES)}')
        return policy


@dataclass
class ErrorVal:
    """A fatal engine error.

    ``kind`` names the failure (see the ``TAPE_*`` and ``UNMATCHED_*``
    constants), ``message`` is the human readable text and ``position`` is
    the 1-based index of the instruction that triggered it.
    """
    kind: str
    message: str
    position: Optional[int] = None


@dataclass
class RunResult:
    """Outcome of a single program run."""
    ok: bool
    error: Optional[ErrorVal] = None
    steps: int = 0

    @property
    def kind(self) -> Optional[str]:
        return self.error.kind if self.error is not None else None
