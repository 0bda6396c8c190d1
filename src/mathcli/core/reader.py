"""Line-oriented input handling.

Turns a text stream into the sequence of numbers to fold:

1. ``clean_and_enumerate`` trims every line and pairs it with its 1-based
   line number. Read failures become InputReadError.
2. ``parse_lines`` drops ignored and blank lines and parses the rest,
   raising ParseError (or warning, in silent mode) for invalid numbers.
"""

import logging
from collections.abc import Iterable, Iterator
from decimal import Decimal

from mathcli.core.config import ReducerConfig
from mathcli.core.exceptions import InputReadError, ParseError
from mathcli.core.numbers import parse_number

logger = logging.getLogger(__name__)


class InputHandler:
    """Clean and parse input lines according to the run configuration."""

    def __init__(self, config: ReducerConfig) -> None:
        self.ignore = config.ignore
        self.silent = config.silent

    def clean_and_enumerate(self, lines: Iterable[str]) -> Iterator[tuple[int, str]]:
        """Yield ``(line_number, trimmed_line)`` pairs.

        Args:
            lines: Text lines, typically an open stdin stream.

        Yields:
            1-based line number and the line with surrounding whitespace removed.

        Raises:
            InputReadError: If reading the stream fails or is interrupted.

        """
        iterator = iter(lines)
        line_number = 0
        while True:
            try:
                line = next(iterator)
            except StopIteration:
                return
            except UnicodeDecodeError as e:
                raise InputReadError(f"Cannot decode input at line {line_number + 1}: {e}") from e
            except OSError as e:
                raise InputReadError(f"Failed to read input: {e}") from e
            except KeyboardInterrupt:
                raise InputReadError("Interrupted while reading input") from None
            line_number += 1
            yield line_number, line.strip()

    def handle(self, line_number: int, value: str) -> Decimal | None:
        """Handle one trimmed line.

        Args:
            line_number: 1-based line number, used for ignore and error reporting.
            value: Trimmed line content.

        Returns:
            The parsed number, or None if the line is skipped (ignored, blank,
            or unparseable in silent mode).

        Raises:
            ParseError: If the line is not a number and silent mode is off.

        """
        if line_number <= self.ignore:
            logger.debug("Ignored line %d: %r", line_number, value)
            return None
        if not value:
            logger.debug("Skipped blank line %d", line_number)
            return None

        number = parse_number(value)
        if number is not None:
            return number

        if self.silent:
            logger.warning("Ignoring parse error for '%s' at line %d", value, line_number)
            return None
        raise ParseError(line_number, value)

    def parse_lines(self, lines: Iterable[str]) -> Iterator[Decimal]:
        """Yield every parsed number from the stream in input order."""
        for line_number, value in self.clean_and_enumerate(lines):
            number = self.handle(line_number, value)
            if number is not None:
                yield number
