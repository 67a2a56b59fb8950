"""Deductions on the statutory pension: health/care insurance, income and church tax."""

import math
from dataclasses import dataclass

from pension_gap_de.params import (
    DEFAULT_CALIBRATION,
    Calibration,
    GermanState,
    HealthInsurance,
    PersonalInputs,
    clamp,
)

# Besteuerungsanteil schedule (Alterseinkünftegesetz, simplified)
_TAXABLE_SHARE_START_YEAR = 2005
_TAXABLE_SHARE_STEP_CHANGE_YEAR = 2020
_TAXABLE_SHARE_FULL_YEAR = 2058


def pension_taxable_share(retirement_year: int) -> float:
    """Taxable share of the pension by retirement cohort.

    - up to 2005: 50%
    - 2006-2020: +2 points per year (max 80%)
    - 2021-2057: +1 point per year (max 100%)
    - from 2058: 100%
    """
    if retirement_year >= _TAXABLE_SHARE_FULL_YEAR:
        return 1.0
    if retirement_year <= _TAXABLE_SHARE_START_YEAR:
        return 0.5
    if retirement_year <= _TAXABLE_SHARE_STEP_CHANGE_YEAR:
        return clamp(0.5 + 0.02 * (retirement_year - _TAXABLE_SHARE_START_YEAR), 0.5, 0.8)
    return clamp(0.8 + 0.01 * (retirement_year - _TAXABLE_SHARE_STEP_CHANGE_YEAR), 0.8, 1.0)


def approx_income_tax(annual_taxable: float, calibration: Calibration = DEFAULT_CALIBRATION) -> float:
    """Annual income tax (EUR), progressive approximation of §32a EStG.

    The two progression zones average a flat rate with a linearly
    rising one; the upper two bands are flat marginal rates.
    """
    if not math.isfinite(annual_taxable) or annual_taxable <= 0:
        return 0.0
    c = calibration
    x = max(0.0, annual_taxable - c.tax_free_allowance)

    width1 = c.band1_upper - c.tax_free_allowance
    b1 = max(0.0, min(x, width1))
    r1 = (
        b1 * (c.band1_base_rate + c.band1_ramp * (b1 / max(1.0, width1))) * 0.5
        + b1 * c.band1_base_rate * 0.5
    )

    width2 = c.band2_upper - c.band1_upper
    b2 = max(0.0, min(x - width1, width2))
    r2 = (
        b2 * (c.band2_base_rate + c.band2_ramp * (b2 / max(1.0, width2))) * 0.5
        + b2 * c.band2_base_rate * 0.5
    )

    b3 = max(0.0, min(x - (c.band2_upper - c.tax_free_allowance), c.band3_upper - c.band2_upper))
    r3 = b3 * c.band3_rate

    b4 = max(0.0, x - (c.band3_upper - c.tax_free_allowance))
    r4 = b4 * c.band4_rate

    return r1 + r2 + r3 + r4


def church_tax_rate(state: GermanState, calibration: Calibration = DEFAULT_CALIBRATION) -> float:
    """Kirchensteuer as a fraction of income tax (8% in BY/BW, 9% elsewhere)."""
    if state in calibration.church_tax_reduced_states:
        return calibration.church_tax_rate_reduced
    return calibration.church_tax_rate


def health_contribution_rate(reduced: bool, calibration: Calibration = DEFAULT_CALIBRATION) -> float:
    """Combined KV + PV rate on the pension.

    KVdR: half general rate + half Zusatzbeitrag; otherwise both in full.
    Pflegeversicherung is always paid in full.
    """
    c = calibration
    if reduced:
        kv = c.health_general_rate / 2 + c.health_supplement_rate / 2
    else:
        kv = c.health_general_rate + c.health_supplement_rate
    return kv + c.care_rate


def private_premium_at(
    premium_today: float,
    years_to_retirement: float,
    calibration: Calibration = DEFAULT_CALIBRATION,
) -> float:
    """PKV premium escalated at medical inflation until retirement."""
    return premium_today * (1 + calibration.private_premium_growth) ** years_to_retirement


@dataclass(frozen=True)
class NetPension:
    gross_monthly: float
    health_deduction: float     # GKV contribution or escalated PKV premium
    taxable_share: float
    income_tax: float           # monthly
    church_tax: float           # monthly
    net_monthly: float          # nominal, floored at 0


def estimate_net_pension(
    gross_monthly: float,
    inputs: PersonalInputs,
    retirement_year: int,
    years_to_retirement: float,
    calibration: Calibration = DEFAULT_CALIBRATION,
) -> NetPension:
    """Net statutory pension at retirement (nominal EUR/month)."""
    if inputs.health_insurance == HealthInsurance.PRIVATE:
        health = private_premium_at(inputs.private_premium, years_to_retirement, calibration)
    else:
        health = gross_monthly * health_contribution_rate(inputs.reduced_contribution, calibration)

    share = pension_taxable_share(retirement_year)
    annual_taxable = max(0.0, gross_monthly * 12 * share)
    income_tax = approx_income_tax(annual_taxable, calibration) / 12
    church = income_tax * church_tax_rate(inputs.state, calibration) if inputs.church_tax else 0.0

    return NetPension(
        gross_monthly=gross_monthly,
        health_deduction=health,
        taxable_share=share,
        income_tax=income_tax,
        church_tax=church,
        net_monthly=max(0.0, gross_monthly - health - income_tax - church),
    )
