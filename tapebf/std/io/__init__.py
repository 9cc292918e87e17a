import io

from .basic_io import BasicIO
from tapebf.types import EofPolicy


def populate_io_channel(stdin=None, stdout=None, eof: str = EofPolicy.DEFAULT) -> BasicIO:
    """Build the byte channel the engine reads from and writes to.

    Byte-string arguments are wrapped in in-memory streams so callers can
    feed canned input (``stdin=b'AB\\n'``) without building a stream
    themselves.
    """
    if isinstance(stdin, (bytes, bytearray)):
        stdin = io.BytesIO(bytes(stdin))
    elif isinstance(stdin, str):
        stdin = io.BytesIO(stdin.encode("utf-8"))
    return BasicIO(stdin=stdin, stdout=stdout, eof=eof)


__all__ = ['BasicIO', 'populate_io_channel']
