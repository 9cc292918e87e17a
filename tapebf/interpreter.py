"""Execution engine for tapebf programs.

This module implements the tape machine: a dispatch loop that walks the
instruction stream one character at a time, eight instruction handlers, and
the bracket scans used to resolve loop jumps. Loop targets are not cached;
every time control reaches a bracket that must jump, the matching bracket is
found again by counting brackets from the current position. That keeps the
engine free of any precomputed state at the cost of O(loop body) work per
jump.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple, Union

from .errors import BfError, unmatched_open, unmatched_close
from .loader import instruction_stream, load_program
from .std.io import BasicIO, populate_io_channel
from .tape import Tape
from .types import (
    DEFAULT_MAX_TAPE_SIZE, INSTRUCTIONS, EofPolicy, RunResult,
    MOVE_RIGHT, MOVE_LEFT, INCREMENT, DECREMENT,
    WRITE, READ, JUMP_IF_ZERO, JUMP_IF_NONZERO,
)

###############################################################################
# Bracket scanning
###############################################################################


def find_matching_close(program: str, index: int) -> int:
    """Return the index of the ']' that closes the '[' at ``index``.

    The scan counts brackets from ``index`` itself, so the opening bracket
    contributes the first open count and nested pairs cancel out before the
    counts balance.
    """
    opened = 0
    closed = 0
    for count in range(index, len(program)):
        c = program[count]
        if c == JUMP_IF_ZERO:
            opened += 1
        elif c == JUMP_IF_NONZERO:
            closed += 1
        if opened == closed:
            return count
    raise unmatched_open(index + 1)


def find_matching_open(program: str, index: int) -> int:
    """Return the index of the '[' that opens the ']' at ``index``.

    Mirror image of find_matching_close, scanning down to and including
    index 0.
    """
    opened = 0
    closed = 0
    for count in range(index, -1, -1):
        c = program[count]
        if c == JUMP_IF_ZERO:
            opened += 1
        elif c == JUMP_IF_NONZERO:
            closed += 1
        if opened == closed:
            return count
    raise unmatched_close(index + 1)


###############################################################################
# Interpreter implementation
###############################################################################


class Interpreter:
    """Core interpreter that executes a tapebf instruction stream."""
    def __init__(
        self,
        channel: Optional[BasicIO] = None,
        max_tape_size: int = DEFAULT_MAX_TAPE_SIZE,
        debug_level: int = 0,
        debug_file: str = 'debug.txt',
    ):
        self.channel = channel if channel is not None else populate_io_channel()
        self.max_tape_size = max_tape_size
        self.debug_level = debug_level
        self.debug_file = debug_file
        self.debug_fp = None
        self.program = ''
        self.tape = Tape(max_tape_size)
        self.cursor = 0
        self.steps = 0
        self.handlers: Dict[str, Callable[[], None]] = {
            MOVE_RIGHT: self.move_right,
            MOVE_LEFT: self.move_left,
            INCREMENT: self.increment,
            DECREMENT: self.decrement,
            WRITE: self.write,
            READ: self.read,
            JUMP_IF_ZERO: self.jump_if_zero,
            JUMP_IF_NONZERO: self.jump_if_nonzero,
        }

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                # stdout carries program bytes only
                print(msg, file=sys.stderr)

    @property
    def position(self) -> int:
        """1-based position of the instruction under the cursor."""
        return self.cursor + 1

    def state(self) -> Tuple[int, bytes, int]:
        return self.tape.pointer, self.tape.snapshot(), self.cursor

    # Public API
    def run(self, program: Union[str, bytes]) -> RunResult:
        """Execute ``program`` from a fresh tape until the cursor runs off its end.

        Raises BfError on the first fatal condition; nothing after the
        offending instruction is executed.
        """
        self.program = instruction_stream(program)
        self.tape = Tape(self.max_tape_size)
        self.cursor = 0
        self.steps = 0
        if self.debug_level > 0 and self.debug_file:
            self.debug_fp = open(self.debug_file, 'w', encoding='utf-8')
        try:
            self.debug(f"run: {len(self.program)} characters, max tape {self.max_tape_size}")
            length = len(self.program)
            while self.cursor < length:
                c = self.program[self.cursor]
                if self.debug_level >= 3:
                    self.debug(f"step {self.steps} @{self.position} {c!r} ptr={self.tape.pointer} cell={self.tape.get()}")
                if c in INSTRUCTIONS:
                    self.handlers[c]()
                else:
                    # anything outside the alphabet is a comment
                    self.cursor += 1
                self.steps += 1
            self.debug(f"finished after {self.steps} steps, tape {len(self.tape)} cells")
            return RunResult(True, steps=self.steps)
        except BfError as e:
            self.debug(f"fatal error after {self.steps} steps: {e}")
            raise
        finally:
            if self.debug_fp:
                self.debug_fp.close()
                self.debug_fp = None

    # Instruction handlers
    def move_right(self):
        grew = self.tape.move_right(self.position)
        if grew and self.debug_level >= 2:
            self.debug(f"tape grew to {len(self.tape)} cells")
        self.cursor += 1

    def move_left(self):
        self.tape.move_left(self.position)
        self.cursor += 1

    def increment(self):
        self.tape.increment()
        self.cursor += 1

    def decrement(self):
        self.tape.decrement()
        self.cursor += 1

    def write(self):
        self.channel.write(self.tape.get())
        self.cursor += 1

    def read(self):
        value = self.channel.read_byte()
        if value is None:
            self.tape.set(self.channel.eof_value(self.tape.get()))
            if self.debug_level >= 2:
                self.debug(f"read @{self.position}: end of input, cell = {self.tape.get()}")
        else:
            self.tape.set(value)
            self.channel.discard_line()
        self.cursor += 1

    def jump_if_zero(self):
        if self.tape.get() != 0:
            self.cursor += 1
            return
        target = find_matching_close(self.program, self.cursor)
        if self.debug_level >= 2:
            self.debug(f"jump forward @{self.position} -> {target + 1}")
        self.cursor = target

    def jump_if_nonzero(self):
        if self.tape.get() == 0:
            self.cursor += 1
            return
        target = find_matching_open(self.program, self.cursor)
        if self.debug_level >= 2:
            self.debug(f"jump back @{self.position} -> {target + 1}")
        self.cursor = target


def run_program(
    source: Union[str, bytes],
    stdin=None,
    stdout=None,
    eof: str = EofPolicy.DEFAULT,
    max_tape_size: int = DEFAULT_MAX_TAPE_SIZE,
    debug_level: int = 0,
    debug_file: str = 'debug.txt',
) -> RunResult:
    """Convenience function to run a program from source and report the outcome.

    Fatal engine errors are returned as a failed RunResult instead of being
    raised.
    """
    channel = populate_io_channel(stdin=stdin, stdout=stdout, eof=eof)
    interpreter = Interpreter(
        channel=channel,
        max_tape_size=max_tape_size,
        debug_level=debug_level,
        debug_file=debug_file,
    )
    try:
        return interpreter.run(source)
    except BfError as e:
        return RunResult(False, error=e.err, steps=interpreter.steps)


def run_file(path: Union[str, Path], **options) -> RunResult:
    """Load a program file and run it; LoadError propagates to the caller."""
    return run_program(load_program(path), **options)
