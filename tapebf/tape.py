from typing import Optional

from tapebf.errors import tape_overflow, tape_underflow
from tapebf.types import CELL_MODULUS, DEFAULT_CELL_VALUE, DEFAULT_MAX_TAPE_SIZE


class Tape:
    """Growable byte tape with a hard left edge and a configured right ceiling.

    The tape starts as a single zero cell. Moving right off the last cell
    appends a new zero cell; the tape never shrinks. ``max_size`` is the
    largest number of cells the tape may ever hold.
    """
    def __init__(self, max_size: int = DEFAULT_MAX_TAPE_SIZE):
        if max_size < 1:
            raise ValueError(f'max tape size must be at least 1, got {max_size}')
        self.max_size = max_size
        self.cells = bytearray([DEFAULT_CELL_VALUE])
        self.pointer = 0

    def __len__(self) -> int:
        return len(self.cells)

    def move_right(self, position: int) -> bool:
        """Advance the pointer, growing the tape if needed.

        Returns True when a new cell was appended. ``position`` is the
        1-based instruction position reported on overflow.
        """
        if self.pointer == self.max_size - 1:
            raise tape_overflow(position)
        grew = False
        if self.pointer + 1 == len(self.cells):
            self.cells.append(DEFAULT_CELL_VALUE)
            grew = True
        self.pointer += 1
        return grew

    def move_left(self, position: int):
        if self.pointer == 0:
            raise tape_underflow(position)
        self.pointer -= 1

    def increment(self):
        self.cells[self.pointer] = (self.cells[self.pointer] + 1) % CELL_MODULUS

    def decrement(self):
        self.cells[self.pointer] = (self.cells[self.pointer] - 1) % CELL_MODULUS

    def get(self) -> int:
        return self.cells[self.pointer]

    def set(self, value: int):
        self.cells[self.pointer] = value % CELL_MODULUS

    def snapshot(self, start: int = 0, end: Optional[int] = None) -> bytes:
        return bytes(self.cells[start:end])

    def __repr__(self) -> str:
        return f"<tape {len(self.cells)} cells, pointer {self.pointer}>"
