"""Tests for health/care deductions, income tax and church tax."""

import math

import pytest
from pension_gap_de.params import Calibration, GermanState, HealthInsurance, PersonalInputs
from pension_gap_de.tax import (
    approx_income_tax,
    church_tax_rate,
    estimate_net_pension,
    health_contribution_rate,
    pension_taxable_share,
    private_premium_at,
)


class TestPensionTaxableShare:
    def test_2005(self):
        assert pension_taxable_share(2005) == 0.5

    def test_before_2005(self):
        assert pension_taxable_share(1990) == 0.5

    def test_two_point_steps(self):
        assert pension_taxable_share(2010) == pytest.approx(0.60)
        assert pension_taxable_share(2020) == pytest.approx(0.80)

    def test_one_point_steps(self):
        assert pension_taxable_share(2021) == pytest.approx(0.81)
        assert pension_taxable_share(2030) == pytest.approx(0.90)

    def test_clamped_before_2058(self):
        assert pension_taxable_share(2057) == pytest.approx(1.0)

    def test_2058(self):
        assert pension_taxable_share(2058) == 1.0

    def test_non_decreasing(self):
        shares = [pension_taxable_share(y) for y in range(1980, 2101)]
        assert all(b >= a for a, b in zip(shares, shares[1:]))


class TestApproxIncomeTax:
    def test_zero(self):
        assert approx_income_tax(0) == 0

    def test_within_allowance(self):
        """Grundfreibetrag 12.000 → keine Steuer"""
        assert approx_income_tax(12000) == 0

    def test_non_finite(self):
        assert approx_income_tax(math.nan) == 0
        assert approx_income_tax(math.inf) == 0

    def test_first_band(self):
        """x=5.000: 5000*0.24*0.5 + 5000*0.14*0.5 = 950"""
        assert approx_income_tax(17000) == pytest.approx(950)

    def test_second_band(self):
        """b2=49.000: 49000*0.42*0.5 + 49000*0.24*0.5 = 16.170"""
        assert approx_income_tax(66000) == pytest.approx(950 + 16170)

    def test_third_band(self):
        """34.000 at 42%"""
        assert approx_income_tax(100000) == pytest.approx(17120 + 14280)

    def test_top_band(self):
        """211.000 at 42% + 23.000 at 45%"""
        assert approx_income_tax(300000) == pytest.approx(17120 + 88620 + 10350)

    def test_partial_second_band(self):
        """annual 24.000: 950 + 7000*(0.24+0.18/7)*0.5 + 7000*0.12 = 2.720"""
        assert approx_income_tax(24000) == pytest.approx(2720)

    def test_non_decreasing(self):
        taxes = [approx_income_tax(x) for x in range(0, 400001, 1000)]
        assert all(b >= a for a, b in zip(taxes, taxes[1:]))


class TestChurchTaxRate:
    def test_bayern(self):
        assert church_tax_rate(GermanState.BAYERN) == 0.08

    def test_baden_wuerttemberg(self):
        assert church_tax_rate(GermanState.BADEN_WUERTTEMBERG) == 0.08

    def test_other_states(self):
        others = [s for s in GermanState if s not in (GermanState.BAYERN, GermanState.BADEN_WUERTTEMBERG)]
        assert len(others) == 14
        assert all(church_tax_rate(s) == 0.09 for s in others)


class TestHealthContributionRate:
    def test_kvdr(self):
        """7,3% + 0,8% + 3,4%"""
        assert health_contribution_rate(True) == pytest.approx(0.115)

    def test_full(self):
        """14,6% + 1,6% + 3,4%"""
        assert health_contribution_rate(False) == pytest.approx(0.196)

    def test_custom_calibration(self):
        cal = Calibration(health_supplement_rate=0.025)
        assert health_contribution_rate(True, cal) == pytest.approx(0.073 + 0.0125 + 0.034)


class TestPrivatePremium:
    def test_today(self):
        assert private_premium_at(450, 0) == pytest.approx(450)

    def test_escalation(self):
        assert private_premium_at(450, 10) == pytest.approx(450 * 1.03 ** 10)


class TestEstimateNetPension:
    def setup_method(self):
        self.inputs = PersonalInputs(state=GermanState.BAYERN, reduced_contribution=True)

    def test_legal_kvdr(self):
        n = estimate_net_pension(2000, self.inputs, 2060, 30)
        assert n.health_deduction == pytest.approx(230)
        assert n.taxable_share == 1.0
        assert n.income_tax == pytest.approx(2720 / 12)
        assert n.church_tax == 0
        assert n.net_monthly == pytest.approx(2000 - 230 - 2720 / 12)

    def test_church_tax(self):
        inputs = PersonalInputs(state=GermanState.BAYERN, church_tax=True)
        n = estimate_net_pension(2000, inputs, 2060, 30)
        assert n.church_tax == pytest.approx(2720 / 12 * 0.08)
        assert n.net_monthly < estimate_net_pension(2000, self.inputs, 2060, 30).net_monthly

    def test_church_tax_without_income_tax(self):
        inputs = PersonalInputs(church_tax=True)
        n = estimate_net_pension(500, inputs, 2060, 30)
        assert n.income_tax == 0
        assert n.church_tax == 0

    def test_private_insurance(self):
        inputs = PersonalInputs(health_insurance=HealthInsurance.PRIVATE, private_premium=450)
        n = estimate_net_pension(2000, inputs, 2060, 0)
        assert n.health_deduction == pytest.approx(450)
        assert n.net_monthly == pytest.approx(2000 - 450 - 2720 / 12)

    def test_private_ignores_kvdr_flag(self):
        a = PersonalInputs(health_insurance=HealthInsurance.PRIVATE, reduced_contribution=True)
        b = PersonalInputs(health_insurance=HealthInsurance.PRIVATE, reduced_contribution=False)
        assert estimate_net_pension(2000, a, 2060, 5) == estimate_net_pension(2000, b, 2060, 5)

    def test_floored_at_zero(self):
        inputs = PersonalInputs(health_insurance=HealthInsurance.PRIVATE, private_premium=450)
        n = estimate_net_pension(100, inputs, 2060, 10)
        assert n.net_monthly == 0
