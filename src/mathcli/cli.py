"""Command-line interface for mathcli.

Apply a mathematical operation to a stream of numbers read from stdin,
one per line. Blank lines are skipped.

Example:
    $ printf '2\\n3\\n\\n' | mathcli mul
    6
    $ printf '6\\n2\\n' | mathcli sub
    4
    $ printf '7\\n2\\n' | mathcli div
    3.5
    $ printf '5\\n4\\n' | mathcli -v add
    9

Exit codes:
    0 = result printed
    1 = parse, input or arithmetic error
    2 = usage error (missing/unknown operation, invalid option)
"""

import logging
import sys
from collections.abc import Callable
from typing import TextIO

import typer
from pydantic import ValidationError

from mathcli import __version__
from mathcli.cli_utils import (
    EXIT_ERROR,
    EXIT_USAGE_ERROR,
    _error,
    _setup_logging,
    _warning,
)
from mathcli.core.config import ReducerConfig
from mathcli.core.exceptions import MathCliError
from mathcli.core.numbers import format_number
from mathcli.core.operations import ALIASES, Operation
from mathcli.core.reducer import reduce_stream

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="mathcli",
    help="Apply a mathematical operation to a stream of numbers on stdin.",
    add_completion=False,
)

# Help text per operation, shown by `mathcli --help`
OPERATION_HELP: dict[Operation, str] = {
    Operation.SUM: "Add all inputs. Identity: 0",
    Operation.MUL: "Multiply all inputs. Identity: 1",
    Operation.SUB: "Subtract all inputs from the first. Identity: 0",
    Operation.DIV: "Divide the first input by all others. Identity: 1",
}


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"mathcli {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    identity_start: bool = typer.Option(
        False,
        "--identity-start",
        help="Use the operation's identity as the starting point (affects sub/div)",
    ),
    silent: bool = typer.Option(
        False,
        "--silent",
        "-s",
        help="Skip lines that fail to parse instead of aborting",
    ),
    ignore: int = typer.Option(
        0,
        "--ignore",
        "-i",
        help="Ignore this many lines at the beginning of input",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Logging verbosity on stderr; repeat for more (-vv)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Apply a mathematical operation to a stream of numbers on stdin."""
    if quiet and verbose:
        # Printed directly: with --quiet the logger would drop a warning
        _warning("Both --quiet and --verbose given; --quiet wins")
    _setup_logging(verbose=verbose, quiet=quiet)

    try:
        ctx.obj = ReducerConfig(
            identity_start=identity_start,
            silent=silent,
            ignore=ignore,
            verbose=verbose,
            quiet=quiet,
        )
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        _error(f"Invalid options: {problems}")
        raise typer.Exit(code=EXIT_USAGE_ERROR) from None


def _input_lines() -> TextIO:
    """Return the stream numbers are read from."""
    return sys.stdin


def _run_operation(ctx: typer.Context, name: str) -> None:
    """Resolve the operation, fold stdin and print the result.

    Nothing is written to stdout unless the whole input folded cleanly.
    """
    # Only registered names reach here; Click rejects unknown commands first
    operation = Operation.from_name(name)

    config = ctx.obj if isinstance(ctx.obj, ReducerConfig) else ReducerConfig()
    logger.debug("Running %s with %r", operation.value, config)

    try:
        result = reduce_stream(_input_lines(), operation, config)
    except MathCliError as e:
        _error(str(e))
        raise typer.Exit(code=EXIT_ERROR) from None

    # Plain echo: the result line must not carry Rich markup or wrapping
    typer.echo(format_number(result))


def _make_command(name: str) -> Callable[[typer.Context], None]:
    def command(ctx: typer.Context) -> None:
        _run_operation(ctx, name)

    command.__name__ = f"{name}_command"
    return command


for _operation in Operation:
    app.command(name=_operation.value, help=OPERATION_HELP[_operation])(
        _make_command(_operation.value)
    )

for _alias, _operation in ALIASES.items():
    app.command(
        name=_alias,
        help=f"Alias for '{_operation.value}'.",
        hidden=True,
    )(_make_command(_alias))


def main() -> None:
    """Console script entry point."""
    app()
