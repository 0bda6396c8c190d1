"""Core reduction logic: operations, numeric domain, input reading and folding."""

from mathcli.core.config import ReducerConfig
from mathcli.core.exceptions import (
    InputReadError,
    MathCliError,
    ParseError,
    ReduceError,
    ReducerStateError,
    UsageError,
)
from mathcli.core.numbers import format_number, parse_number
from mathcli.core.operations import ALIASES, Operation
from mathcli.core.reader import InputHandler
from mathcli.core.reducer import Reducer, ReducerState, reduce_stream

__all__ = [
    "ALIASES",
    "InputHandler",
    "InputReadError",
    "MathCliError",
    "Operation",
    "ParseError",
    "ReduceError",
    "Reducer",
    "ReducerConfig",
    "ReducerState",
    "ReducerStateError",
    "UsageError",
    "format_number",
    "parse_number",
    "reduce_stream",
]
