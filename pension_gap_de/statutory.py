"""Statutory pension estimate (gesetzliche Rente) via earnings points."""

from dataclasses import dataclass

from pension_gap_de.params import DEFAULT_CALIBRATION, Calibration, clamp


@dataclass(frozen=True)
class StatutoryPension:
    earnings_points: float        # Entgeltpunkte, summed over all work years
    pension_value: float          # Rentenwert at retirement (EUR per point)
    gross_monthly: float          # Bruttorente at retirement (nominal)


def wage_growth_rate(inflation: float, calibration: Calibration = DEFAULT_CALIBRATION) -> float:
    """Nominal wage growth: inflation plus a real premium, capped."""
    return clamp(inflation + calibration.real_wage_premium, 0.0, calibration.max_wage_growth)


def earnings_points_for_year(
    annual_gross: float,
    year_index: int,
    wage_growth: float,
    calibration: Calibration = DEFAULT_CALIBRATION,
) -> float:
    """Entgeltpunkte for work year i.

    Income and the scheme-wide average both grow with wages; the
    contribution ceiling stays fixed.
    """
    growth = (1 + wage_growth) ** year_index
    contributable = min(annual_gross * growth, calibration.contribution_ceiling)
    average = calibration.average_earnings * growth
    if average <= 0:
        return 0.0
    return clamp(contributable / average, 0.0, calibration.earnings_point_cap)


def accrue_earnings_points(
    annual_gross: float,
    work_years: int,
    wage_growth: float,
    calibration: Calibration = DEFAULT_CALIBRATION,
) -> float:
    """Sum of yearly earnings points; non-positive work years accrue nothing."""
    return sum(
        earnings_points_for_year(annual_gross, i, wage_growth, calibration)
        for i in range(max(0, work_years))
    )


def pension_value_at(years_to_retirement: float, calibration: Calibration = DEFAULT_CALIBRATION) -> float:
    """Project the current Rentenwert forward over fractional years."""
    return calibration.pension_value * (1 + calibration.pension_value_growth) ** years_to_retirement


def estimate_statutory_pension(
    monthly_gross: float,
    work_years: int,
    years_to_retirement: float,
    inflation: float,
    calibration: Calibration = DEFAULT_CALIBRATION,
) -> StatutoryPension:
    annual_gross = max(0.0, monthly_gross * 12)
    points = accrue_earnings_points(
        annual_gross, work_years, wage_growth_rate(inflation, calibration), calibration,
    )
    value = pension_value_at(years_to_retirement, calibration)
    return StatutoryPension(
        earnings_points=points,
        pension_value=value,
        gross_monthly=points * value,
    )
