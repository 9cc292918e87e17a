from tapebf.types import (
    ErrorVal, TAPE_OVERFLOW, TAPE_UNDERFLOW,
    UNMATCHED_OPEN_BRACKET, UNMATCHED_CLOSE_BRACKET,
)


class BfError(Exception):
    """Exception type used to propagate fatal engine errors."""
    def __init__(self, err: ErrorVal):
        super().__init__(f"{err.kind}: {err.message}")
        self.err = err

    @property
    def kind(self) -> str:
        return self.err.kind

    @property
    def position(self):
        return self.err.position


class LoadError(Exception):
    """Raised when a program file cannot be opened or read."""
    def __init__(self, path, reason: str):
        super().__init__(f'source file "{path}" could not be opened: {reason}')
        self.path = path


def tape_overflow(position: int) -> BfError:
    return BfError(ErrorVal(TAPE_OVERFLOW, f'Attempted tape overflow at character {position}', position))


def tape_underflow(position: int) -> BfError:
    return BfError(ErrorVal(TAPE_UNDERFLOW, f'Attempted tape underflow at character {position}', position))


def unmatched_open(position: int) -> BfError:
    return BfError(ErrorVal(
        UNMATCHED_OPEN_BRACKET,
        "Unbounded jump instruction; expected corresponding ']' but was not found",
        position,
    ))


def unmatched_close(position: int) -> BfError:
    return BfError(ErrorVal(
        UNMATCHED_CLOSE_BRACKET,
        "Unbounded jump instruction; expected corresponding '[' but was not found",
        position,
    ))
