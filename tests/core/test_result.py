"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings
    - has_warning() method
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pylinear.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _result(**overrides):
    kwargs = dict(
        params=FakeParams(value=1.0),
        info={},
        timing=None,
        backend_name="elimination",
    )
    kwargs.update(overrides)
    return Result(**kwargs)


class TestResultConstruction:
    """Result can be created with any payload type."""

    def test_basic_creation(self):
        result = _result(
            params=FakeParams(value=42.0),
            info={"method": "gaussian_elimination", "swaps": 2},
            timing={"total_seconds": 0.01},
        )
        assert result.params.value == 42.0
        assert result.info["swaps"] == 2
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "elimination"

    def test_timing_none(self):
        assert _result().timing is None


class TestWarnings:
    """Default and explicit warnings."""

    def test_warnings_default_empty(self):
        result = _result()
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)

    def test_has_warning_substring(self):
        result = _result(warnings=("Null pivot in column 2; column skipped",))
        assert result.has_warning("Null pivot")
        assert not result.has_warning("diverging")


class TestImmutability:
    """Result is frozen: no attribute mutation allowed."""

    def test_cannot_set_params(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)

    def test_cannot_set_warnings(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.warnings = ("new warning",)
