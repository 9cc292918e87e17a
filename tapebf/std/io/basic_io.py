import sys
from typing import Optional

from tapebf.types import EofPolicy


class BasicIO:
    """Single-byte channel over a pair of streams.

    Streams may be binary or text; a text stream is used through its
    ``buffer`` when it has one. When no stream is given, ``sys.stdin`` and
    ``sys.stdout`` are looked up on every call so that redirection done after
    construction is honoured.
    """
    def __init__(self, stdin=None, stdout=None, eof: str = EofPolicy.DEFAULT):
        self._stdin = stdin
        self._stdout = stdout
        self.eof = EofPolicy.validate(eof)
        self.bytes_written = 0
        self.bytes_read = 0
        self._pending = b''

    @staticmethod
    def _binary(stream):
        return getattr(stream, 'buffer', stream)

    @property
    def stdin(self):
        return self._binary(self._stdin if self._stdin is not None else sys.stdin)

    @property
    def stdout(self):
        return self._binary(self._stdout if self._stdout is not None else sys.stdout)

    def write(self, byte: int):
        out = self.stdout
        data = bytes([byte])
        try:
            out.write(data)
        except TypeError:
            # plain text stream without a buffer
            out.write(data.decode('latin-1'))
        out.flush()
        self.bytes_written += 1

    def read_byte(self) -> Optional[int]:
        """Return the next input byte, or None once the input is exhausted.

        A text stream without a buffer is read a character at a time and
        handed out as the bytes of its UTF-8 encoding.
        """
        if self._pending:
            byte, self._pending = self._pending[0], self._pending[1:]
            self.bytes_read += 1
            return byte
        data = self.stdin.read(1)
        if not data:
            return None
        if isinstance(data, str):
            data = data.encode('utf-8')
            self._pending = data[1:]
        self.bytes_read += 1
        return data[0]

    def discard_line(self):
        """Drop pending input up to and including the next newline."""
        self._pending = b''
        self.stdin.readline()

    def eof_value(self, current: int) -> int:
        if self.eof == EofPolicy.ZERO:
            return 0
        if self.eof == EofPolicy.UNCHANGED:
            return current
        return 255
