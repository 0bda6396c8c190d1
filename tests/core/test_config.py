"""Tests for ReducerConfig validation."""

import pytest
from pydantic import ValidationError

from mathcli.core.config import ReducerConfig


class TestReducerConfig:
    """Defaults, constraints and immutability."""

    def test_defaults(self) -> None:
        config = ReducerConfig()
        assert config.identity_start is False
        assert config.silent is False
        assert config.ignore == 0
        assert config.verbose == 0
        assert config.quiet is False

    def test_negative_ignore_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ReducerConfig(ignore=-1)

    def test_negative_verbose_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ReducerConfig(verbose=-1)

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ReducerConfig(delimiter=",")  # type: ignore[call-arg]

    def test_frozen(self) -> None:
        """Config cannot be mutated after construction."""
        config = ReducerConfig()
        with pytest.raises(ValidationError):
            config.ignore = 3  # type: ignore[misc]

