"""Retirement gap projection for Germany (Versorgungslücke)."""

from pension_gap_de.params import (
    Calibration,
    DEFAULT_CALIBRATION,
    EconomicAssumptions,
    GermanState,
    HealthInsurance,
    PersonalInputs,
    RateSet,
    resolve_rates,
    sanitize_inputs,
)
from pension_gap_de.annuity import (
    Bounded,
    Payment,
    UNBOUNDED,
    Unbounded,
    future_value_annuity,
    is_bounded,
    payment_for_future_value,
    payout_from_capital,
    present_value_annuity,
)
from pension_gap_de.timeaxis import add_years, build_timeline, months_between, years_between
from pension_gap_de.statutory import (
    StatutoryPension,
    accrue_earnings_points,
    estimate_statutory_pension,
    pension_value_at,
    wage_growth_rate,
)
from pension_gap_de.tax import (
    NetPension,
    approx_income_tax,
    church_tax_rate,
    estimate_net_pension,
    health_contribution_rate,
    pension_taxable_share,
)
from pension_gap_de.solver import GapSolution, coverage_ratio, solve_gap, to_display_money
from pension_gap_de.sensitivity import HorizonProjection, project_horizon, project_horizons
from pension_gap_de.engine import (
    Bar,
    BarSegment,
    DomainError,
    DomainErrorKind,
    ProjectionOutcome,
    ProjectionResult,
    project_retirement,
)
from pension_gap_de.scenarios import SCENARIOS, run_scenarios

__all__ = [
    "Calibration",
    "DEFAULT_CALIBRATION",
    "EconomicAssumptions",
    "GermanState",
    "HealthInsurance",
    "PersonalInputs",
    "RateSet",
    "resolve_rates",
    "sanitize_inputs",
    "Bounded",
    "Payment",
    "UNBOUNDED",
    "Unbounded",
    "future_value_annuity",
    "is_bounded",
    "payment_for_future_value",
    "payout_from_capital",
    "present_value_annuity",
    "add_years",
    "build_timeline",
    "months_between",
    "years_between",
    "StatutoryPension",
    "accrue_earnings_points",
    "estimate_statutory_pension",
    "pension_value_at",
    "wage_growth_rate",
    "NetPension",
    "approx_income_tax",
    "church_tax_rate",
    "estimate_net_pension",
    "health_contribution_rate",
    "pension_taxable_share",
    "GapSolution",
    "coverage_ratio",
    "solve_gap",
    "to_display_money",
    "HorizonProjection",
    "project_horizon",
    "project_horizons",
    "Bar",
    "BarSegment",
    "DomainError",
    "DomainErrorKind",
    "ProjectionOutcome",
    "ProjectionResult",
    "project_retirement",
    "SCENARIOS",
    "run_scenarios",
]
