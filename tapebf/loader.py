"""Program loading for tapebf.

Source files are read verbatim. Every byte of the file becomes exactly one
character of the instruction stream (latin-1 decoding), so whitespace,
comments and non-ASCII bytes keep their positions and error positions line
up with byte offsets in the file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Union

from .errors import LoadError


def instruction_stream(source: Union[str, bytes, bytearray, Iterable[str]]) -> str:
    """Normalize a program given in any supported form into an immutable str."""
    if isinstance(source, str):
        return source
    if isinstance(source, (bytes, bytearray)):
        return bytes(source).decode('latin-1')
    return ''.join(source)


def load_program(path: Union[str, Path]) -> str:
    file_path = Path(path)
    try:
        with open(file_path, 'rb') as f:
            data = f.read()
    except OSError as e:
        raise LoadError(file_path, e.strerror or str(e)) from e
    return instruction_stream(data)
