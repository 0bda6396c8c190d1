"""mathcli - apply a mathematical operation to a stream of numbers."""

__version__ = "0.1.0"
