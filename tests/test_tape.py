import pytest

from tapebf.errors import BfError
from tapebf.tape import Tape


def test_new_tape_has_one_zero_cell():
    tape = Tape()
    assert len(tape) == 1
    assert tape.pointer == 0
    assert tape.get() == 0


@pytest.mark.parametrize('start', [0, 1, 127, 128, 254, 255])
def test_increment_and_decrement_wrap_after_256_steps(start):
    tape = Tape()
    tape.set(start)
    for _ in range(256):
        tape.increment()
    assert tape.get() == start
    for _ in range(256):
        tape.decrement()
    assert tape.get() == start


def test_cell_values_wrap_at_the_byte_boundary():
    tape = Tape()
    tape.decrement()
    assert tape.get() == 255
    tape.increment()
    assert tape.get() == 0
    tape.set(300)
    assert tape.get() == 44


def test_move_right_grows_and_never_shrinks():
    tape = Tape()
    tape.increment()
    assert tape.move_right(1) is True
    assert len(tape) == 2
    tape.move_left(2)
    assert tape.pointer == 0
    assert len(tape) == 2
    assert tape.snapshot() == bytes([1, 0])
    # the cell already exists the second time around
    assert tape.move_right(3) is False
    assert len(tape) == 2


def test_move_left_at_origin_is_underflow():
    tape = Tape()
    with pytest.raises(BfError) as excinfo:
        tape.move_left(7)
    assert excinfo.value.kind == 'TapeUnderflow'
    assert excinfo.value.position == 7
    assert tape.pointer == 0


def test_full_walk_to_ceiling_and_back():
    tape = Tape(max_size=16)
    for i in range(15):
        tape.move_right(i + 1)
    assert tape.pointer == 15
    assert len(tape) == 16
    for i in range(15):
        tape.move_left(i + 16)
    assert tape.pointer == 0


def test_move_right_past_ceiling_is_overflow():
    tape = Tape(max_size=3)
    tape.move_right(1)
    tape.move_right(2)
    with pytest.raises(BfError) as excinfo:
        tape.move_right(3)
    assert excinfo.value.kind == 'TapeOverflow'
    assert excinfo.value.position == 3
    assert 'overflow at character 3' in excinfo.value.err.message
    assert tape.pointer == 2
    assert len(tape) == 3


def test_single_cell_tape_cannot_move_right():
    tape = Tape(max_size=1)
    with pytest.raises(BfError):
        tape.move_right(1)


def test_max_size_must_be_positive():
    with pytest.raises(ValueError):
        Tape(max_size=0)
