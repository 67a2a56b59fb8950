"""Tests for delayed-start horizons."""

import pytest
from pension_gap_de.annuity import UNBOUNDED, Bounded
from pension_gap_de.sensitivity import project_horizon, project_horizons


class TestProjectHorizon:
    def test_zero_rate_delay(self):
        """120 Monate − 4 Jahre = 72 Monate"""
        h = project_horizon(4, 12000, 100, 120, 0.0)
        assert h.months_remaining == 72
        assert h.required_saving.value == pytest.approx(12000 / 72)
        assert h.capital == pytest.approx(7200)
        assert h.contributions == pytest.approx(7200)
        assert h.interest == pytest.approx(0)

    def test_now(self):
        h = project_horizon(0, 12000, 100, 120, 0.0)
        assert h.months_remaining == 120
        assert h.required_saving.value == pytest.approx(100)

    def test_positive_rate_earns_interest(self):
        h = project_horizon(4, 100000, 200, 360, 0.07 / 12)
        assert h.interest > 0
        assert h.capital == pytest.approx(h.contributions + h.interest)

    def test_delay_past_retirement(self):
        h = project_horizon(8, 50000, 100, 36, 0.005)
        assert h.months_remaining == -60
        assert h.required_saving is UNBOUNDED
        assert h.capital == 0
        assert h.contributions == 0
        assert h.interest == 0

    def test_zero_capital_target(self):
        h = project_horizon(4, 0, 100, 120, 0.005)
        assert h.required_saving == Bounded(0.0)

    def test_negative_delay(self):
        with pytest.raises(ValueError, match="must not be negative"):
            project_horizon(-1, 1000, 100, 120, 0.005)


class TestProjectHorizons:
    def test_order(self):
        hs = project_horizons((4, 8), 100000, 200, 360, 0.07 / 12)
        assert [h.delay_years for h in hs] == [0, 4, 8]

    def test_later_start_needs_more(self):
        hs = project_horizons((4, 8), 100000, 200, 360, 0.07 / 12)
        values = [h.required_saving.value for h in hs]
        assert values[0] < values[1] < values[2]

    def test_later_start_builds_less_capital(self):
        hs = project_horizons((4, 8), 100000, 200, 360, 0.07 / 12)
        assert hs[0].capital > hs[1].capital > hs[2].capital
