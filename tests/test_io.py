import io

import pytest

from tapebf.std.io import BasicIO, populate_io_channel
from tapebf.types import EofPolicy


def test_write_emits_raw_bytes():
    out = io.BytesIO()
    channel = BasicIO(stdout=out)
    for byte in (0, 10, 64, 255):
        channel.write(byte)
    assert out.getvalue() == bytes([0, 10, 64, 255])
    assert channel.bytes_written == 4


def test_write_through_text_stream_buffer():
    out = io.TextIOWrapper(io.BytesIO(), encoding='utf-8', write_through=True)
    channel = BasicIO(stdout=out)
    channel.write(200)
    assert out.buffer.getvalue() == bytes([200])


def test_read_then_discard_rest_of_line():
    channel = populate_io_channel(stdin=b'AB\nC\n')
    assert channel.read_byte() == ord('A')
    channel.discard_line()
    assert channel.read_byte() == ord('C')
    channel.discard_line()
    assert channel.read_byte() is None


def test_discard_line_without_trailing_newline_consumes_to_end():
    channel = populate_io_channel(stdin=b'xyz')
    assert channel.read_byte() == ord('x')
    channel.discard_line()
    assert channel.read_byte() is None


def test_str_input_is_encoded():
    channel = populate_io_channel(stdin='hi\n')
    assert channel.read_byte() == ord('h')


@pytest.mark.parametrize('policy, current, expected', [
    (EofPolicy.MINUS_ONE, 7, 255),
    (EofPolicy.ZERO, 7, 0),
    (EofPolicy.UNCHANGED, 7, 7),
])
def test_eof_value(policy, current, expected):
    channel = BasicIO(stdin=io.BytesIO(b''), eof=policy)
    assert channel.eof_value(current) == expected


def test_unknown_eof_policy_rejected():
    with pytest.raises(ValueError):
        BasicIO(eof='-2')


def test_bytes_read_counts_each_byte_handed_out():
    channel = populate_io_channel(stdin=b'AB\nC\n')
    channel.read_byte()
    channel.discard_line()
    channel.read_byte()
    channel.discard_line()
    assert channel.read_byte() is None
    assert channel.bytes_read == 2


def test_text_stream_without_buffer_yields_utf8_bytes():
    channel = BasicIO(stdin=io.StringIO('€\n'))
    assert [channel.read_byte() for _ in range(3)] == [0xE2, 0x82, 0xAC]
    assert channel.read_byte() == ord('\n')
    assert channel.read_byte() is None
    assert channel.bytes_read == 4


def test_text_stream_and_str_input_agree():
    from_stream = BasicIO(stdin=io.StringIO('éx\n'))
    from_str = populate_io_channel(stdin='éx\n')
    assert from_stream.read_byte() == from_str.read_byte() == 0xC3


def test_discard_line_drops_rest_of_multibyte_character():
    channel = BasicIO(stdin=io.StringIO('€z\nQ\n'))
    assert channel.read_byte() == 0xE2
    channel.discard_line()
    assert channel.read_byte() == ord('Q')
