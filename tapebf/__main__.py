"""CLI entry point for the tapebf interpreter.

Usage:
    python -m tapebf [-v|-vv|-vvv] [--eof {-1,0,unchanged}] [--max-tape N] <program_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --eof         Value stored by a read at end of input: -1 stores 255,
                0 stores 0, unchanged leaves the cell alone (default -1)
  --max-tape    Maximum number of tape cells before a rightward move fails
  --debug-file  Where debug output goes when verbosity is above zero

Debug information is written to `debug.txt` in the current directory when
verbosity is greater than zero. Exit status is 0 when the program runs to
completion and 1 on a wrong argument count, an unreadable source file or a
fatal run error.
"""

import argparse
import sys

from .errors import BfError, LoadError
from .interpreter import Interpreter
from .loader import load_program
from .std.io import populate_io_channel
from .types import DEFAULT_MAX_TAPE_SIZE, EofPolicy


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='tapebf', description='Tape language interpreter')
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--eof', choices=EofPolicy.CHOICES, default=EofPolicy.DEFAULT,
                        help='value stored by a read at end of input (default %(default)s)')
    parser.add_argument('--max-tape', type=int, default=DEFAULT_MAX_TAPE_SIZE, metavar='N',
                        help='maximum number of tape cells (default %(default)s)')
    parser.add_argument('--debug-file', default='debug.txt', metavar='PATH',
                        help='debug output file used when -v is given')
    parser.add_argument('program', nargs='*', help='program file to execute')
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if len(args.program) != 1:
        print(f"Failed to run. Expected 1 program file but {len(args.program)} were given.", file=sys.stderr)
        parser.print_usage(sys.stderr)
        sys.exit(1)
    if args.max_tape < 1:
        print(f"Error: --max-tape must be at least 1, got {args.max_tape}", file=sys.stderr)
        sys.exit(1)

    try:
        source = load_program(args.program[0])
    except LoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    channel = populate_io_channel(eof=args.eof)
    interpreter = Interpreter(
        channel=channel,
        max_tape_size=args.max_tape,
        debug_level=args.v,
        debug_file=args.debug_file,
    )
    try:
        interpreter.run(source)
    except BfError as e:
        sys.stdout.flush()
        print(f"ERROR: {e.err.message}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
