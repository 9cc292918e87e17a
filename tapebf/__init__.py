# tapebf package
# This package provides an interpreter for the eight-instruction tape language.
from .interpreter import run_program, run_file, Interpreter
from .errors import BfError, LoadError
from .types import RunResult, ErrorVal, EofPolicy

__all__ = [
    'run_program',
    'run_file',
    'Interpreter',
    'BfError',
    'LoadError',
    'RunResult',
    'ErrorVal',
    'EofPolicy',
]
