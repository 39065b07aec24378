"""
Tests for shared compute infrastructure: Timer and tolerance tiers.
"""

import time

import pytest

from pymatrix.core.compute import (
    DEFAULT,
    EXACT,
    LOOSE,
    Timer,
    ToleranceTier,
    select_tolerance,
)


class TestTimer:

    def test_result_has_total(self):
        timer = Timer()
        timer.start()
        timer.stop()
        result = timer.result()
        assert result["total_seconds"] >= 0.0

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section("inverse"):
            time.sleep(0.001)
        with timer.section("inverse"):
            time.sleep(0.001)
        timer.stop()
        result = timer.result()
        assert result["inverse"] >= 0.002
        assert set(result) == {"total_seconds", "inverse"}

    def test_section_recorded_on_exception(self):
        timer = Timer()
        timer.start()
        with pytest.raises(ZeroDivisionError):
            with timer.section("failing"):
                1 / 0
        timer.stop()
        assert "failing" in timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()


class TestTolerances:

    def test_exact_has_no_slack(self):
        assert EXACT.rtol == 0.0
        assert EXACT.atol == 0.0

    def test_tiers_ordered(self):
        assert EXACT.rtol < DEFAULT.rtol < LOOSE.rtol
        assert EXACT.atol < DEFAULT.atol < LOOSE.atol

    def test_select_tolerance(self):
        assert select_tolerance() is DEFAULT
        assert select_tolerance(is_ill_conditioned=True) is LOOSE

    def test_tier_is_frozen(self):
        tier = ToleranceTier(rtol=1e-3, atol=1e-3, name="custom", description="")
        with pytest.raises(AttributeError):
            tier.rtol = 0.5
