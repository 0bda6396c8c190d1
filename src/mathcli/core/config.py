"""Run configuration for mathcli.

ReducerConfig collects the global CLI options into a single validated,
immutable object that is handed from the Typer callback to the subcommand.
There are no configuration files or environment variables.
"""

from pydantic import BaseModel, ConfigDict, Field


class ReducerConfig(BaseModel):
    """Options controlling how input is read and folded.

    Attributes:
        identity_start: Start every operation from its identity value instead
            of the first parsed value. SUM and MUL always start from the
            identity, so this only changes SUB and DIV.
        silent: Log and skip lines that fail to parse instead of aborting.
        ignore: Number of leading physical lines to skip without parsing.
        verbose: Logging verbosity; 0 = WARNING, 1 = INFO, 2+ = DEBUG.
        quiet: Only log errors. Takes precedence over verbose.

    Example:
        >>> config = ReducerConfig(ignore=1, silent=True)
        >>> config.ignore
        1

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    identity_start: bool = Field(
        default=False,
        description="Fold from the operation's identity value",
    )
    silent: bool = Field(
        default=False,
        description="Skip unparseable lines with a warning",
    )
    ignore: int = Field(
        default=0,
        ge=0,
        description="Leading lines to skip without parsing",
    )
    verbose: int = Field(
        default=0,
        ge=0,
        description="Logging verbosity level",
    )
    quiet: bool = Field(
        default=False,
        description="Only log errors",
    )
