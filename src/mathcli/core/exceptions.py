"""Exception hierarchy for mathcli.

All errors raised by the core derive from MathCliError so the CLI layer can
map them onto exit codes in one place. Core modules raise, they never print
or exit.
"""


class MathCliError(Exception):
    """Base class for all mathcli errors."""

    pass


class UsageError(MathCliError):
    """Missing or unrecognized operation, or invalid options.

    Raised before any input is read.
    """

    pass


class ParseError(MathCliError):
    """A non-blank input line is not a valid number.

    Attributes:
        line_number: 1-based physical line number in the input stream.
        content: The trimmed line content that failed to parse.

    """

    def __init__(self, line_number: int, content: str) -> None:
        self.line_number = line_number
        self.content = content
        super().__init__(f"Failed to parse '{content}' at line {line_number}")


class InputReadError(MathCliError):
    """Reading standard input failed (I/O error, bad encoding, interrupt)."""

    pass


class ReduceError(MathCliError):
    """Arithmetic failure while folding, e.g. division by zero or overflow."""

    pass


class ReducerStateError(MathCliError):
    """A value was fed to a reducer that has already been finalized."""

    pass
