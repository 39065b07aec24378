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

from pymatrix.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _result(**overrides):
    fields = dict(
        params=FakeParams(value=1.0),
        info={},
        timing=None,
        method="adjugate",
    )
    fields.update(overrides)
    return Result(**fields)


class TestResultConstruction:
    """Result can be created with any payload type."""

    def test_basic_creation(self):
        result = _result(
            params=FakeParams(value=42.0),
            info={"size": 3},
            timing={"total_seconds": 0.01},
        )
        assert result.params.value == 42.0
        assert result.info["size"] == 3
        assert result.timing["total_seconds"] == 0.01
        assert result.method == "adjugate"

    def test_timing_none(self):
        assert _result().timing is None

    def test_warnings_default_empty(self):
        result = _result()
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)


class TestImmutability:
    """Result is frozen: attribute assignment raises."""

    def test_cannot_set_params(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)

    def test_cannot_set_method(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.method = "lu"


class TestHasWarning:
    """has_warning() checks for substring in any warning."""

    def test_no_warnings_returns_false(self):
        assert _result().has_warning("anything") is False

    def test_substring_match(self):
        result = _result(warnings=("coefficient matrix is nearly singular",))
        assert result.has_warning("nearly singular") is True
        assert result.has_warning("diverging") is False

    def test_multiple_warnings(self):
        result = _result(warnings=("first note", "second note"))
        assert result.has_warning("first") is True
        assert result.has_warning("second") is True
