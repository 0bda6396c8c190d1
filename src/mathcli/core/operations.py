"""Reduction operations supported by mathcli.

Each operation carries an identity value and a binary combining function:

- SUM: identity 0, addition
- MUL: identity 1, multiplication
- SUB: identity 0, subtraction
- DIV: identity 1, division

Aliases (``add``, ``product``) resolve to existing members and never define
new operations.
"""

import logging
import operator
from collections.abc import Callable
from decimal import Decimal
from enum import Enum

from mathcli.core.exceptions import UsageError

logger = logging.getLogger(__name__)


class Operation(Enum):
    """Reduction rule applied across all parsed input numbers.

    SUM and MUL are commutative and always fold from their identity.
    SUB and DIV fold from the first value unless the identity start is
    requested explicitly.

    Example:
        >>> Operation.from_name("product") is Operation.MUL
        True
        >>> Operation.SUM.combine(Decimal(2), Decimal(3))
        Decimal('5')

    """

    SUM = "sum"
    MUL = "mul"
    SUB = "sub"
    DIV = "div"

    @property
    def identity(self) -> Decimal:
        """Starting accumulator value that leaves any operand unchanged."""
        return _IDENTITIES[self]

    @property
    def commutative(self) -> bool:
        """Whether operand order is irrelevant to the abstract result."""
        return self in (Operation.SUM, Operation.MUL)

    def combine(self, accumulator: Decimal, value: Decimal) -> Decimal:
        """Apply the operation to the accumulator and the next value."""
        return _COMBINERS[self](accumulator, value)

    @classmethod
    def names(cls) -> list[str]:
        """Canonical operation names in declaration order."""
        return [op.value for op in cls]

    @classmethod
    def from_name(cls, name: str) -> "Operation":
        """Resolve a canonical name or alias to an Operation.

        Args:
            name: Operation name, case-insensitive, surrounding whitespace ignored.

        Returns:
            The matching Operation member.

        Raises:
            UsageError: If the name is neither an operation nor an alias.

        """
        key = name.strip().lower()
        if key in ALIASES:
            logger.debug("Resolved alias '%s' to '%s'", key, ALIASES[key].value)
            return ALIASES[key]
        try:
            return cls(key)
        except ValueError:
            valid = ", ".join(cls.names() + sorted(ALIASES))
            raise UsageError(f"Unknown operation: '{name}'. Valid operations: {valid}") from None


_IDENTITIES: dict[Operation, Decimal] = {
    Operation.SUM: Decimal(0),
    Operation.MUL: Decimal(1),
    Operation.SUB: Decimal(0),
    Operation.DIV: Decimal(1),
}

_COMBINERS: dict[Operation, Callable[[Decimal, Decimal], Decimal]] = {
    Operation.SUM: operator.add,
    Operation.MUL: operator.mul,
    Operation.SUB: operator.sub,
    Operation.DIV: operator.truediv,
}

# Alternative subcommand names mapped onto existing operations
ALIASES: dict[str, Operation] = {
    "add": Operation.SUM,
    "product": Operation.MUL,
}
