"""Fold parsed numbers into a single result.

The Reducer is a two-state machine: READING while values are fed in order,
DONE once ``finish`` returns the final accumulator. Nothing is produced on
failure; callers only see a result when the whole stream folded cleanly.
"""

import decimal
import logging
from collections.abc import Iterable
from decimal import Decimal
from enum import Enum

from mathcli.core.config import ReducerConfig
from mathcli.core.exceptions import ReduceError, ReducerStateError
from mathcli.core.numbers import arithmetic_context
from mathcli.core.operations import Operation
from mathcli.core.reader import InputHandler

logger = logging.getLogger(__name__)


class ReducerState(Enum):
    """Lifecycle of a Reducer."""

    READING = "reading"
    DONE = "done"


class Reducer:
    """Accumulate values with a single operation.

    Commutative operations start from the identity. Non-commutative ones
    start from the first fed value unless ``identity_start`` is set. With no
    values fed, the result is always the identity.

    Example:
        >>> reducer = Reducer(Operation.MUL)
        >>> reducer.feed(Decimal(2))
        >>> reducer.feed(Decimal(3))
        >>> reducer.finish()
        Decimal('6')

    """

    def __init__(self, operation: Operation, *, identity_start: bool = False) -> None:
        self.operation = operation
        self.state = ReducerState.READING
        self.count = 0
        self._from_identity = identity_start or operation.commutative
        self._accumulator: Decimal | None = operation.identity if self._from_identity else None
        self._context = arithmetic_context()

    def feed(self, value: Decimal) -> None:
        """Combine the next value into the accumulator.

        Raises:
            ReducerStateError: If the reducer has already been finalized.
            ReduceError: On arithmetic failure (division by zero, overflow).

        """
        if self.state is ReducerState.DONE:
            raise ReducerStateError("Cannot feed a finalized reducer")

        try:
            with decimal.localcontext(self._context):
                if self._accumulator is None:
                    # Round the starting value into the context like any other result
                    self._accumulator = +value
                else:
                    self._accumulator = self.operation.combine(self._accumulator, value)
        except decimal.DivisionByZero:
            raise ReduceError(f"Division by zero at value #{self.count + 1}") from None
        except decimal.Overflow:
            raise ReduceError(f"Numeric overflow at value #{self.count + 1}") from None
        except decimal.DecimalException as e:
            raise ReduceError(f"Invalid arithmetic at value #{self.count + 1}: {e!r}") from None
        self.count += 1

    def finish(self) -> Decimal:
        """Finalize and return the accumulator.

        Returns the identity when no values were fed. Calling it again
        returns the same value.
        """
        if self._accumulator is None:
            self._accumulator = self.operation.identity
        if self.state is ReducerState.READING:
            self.state = ReducerState.DONE
            logger.info(
                "Folded %d value(s) with %s", self.count, self.operation.value
            )
        return self._accumulator


def reduce_stream(
    lines: Iterable[str],
    operation: Operation,
    config: ReducerConfig | None = None,
) -> Decimal:
    """Parse every line of the stream and fold it with the operation.

    Args:
        lines: Input text lines (e.g. ``sys.stdin``).
        operation: Operation to fold with.
        config: Run options; defaults to ReducerConfig().

    Returns:
        The final accumulator.

    Raises:
        ParseError: A non-blank line is not a number (and silent mode is off).
        InputReadError: Reading the stream failed.
        ReduceError: Arithmetic failure during the fold.

    """
    if config is None:
        config = ReducerConfig()

    handler = InputHandler(config)
    reducer = Reducer(operation, identity_start=config.identity_start)

    logger.info("Reading input for %s", operation.value)
    for value in handler.parse_lines(lines):
        reducer.feed(value)
    return reducer.finish()
