"""Pension gap (Versorgungslücke), required capital and top-up savings rate."""

import math
from dataclasses import dataclass

from pension_gap_de.annuity import (
    Payment,
    Unbounded,
    future_value_annuity,
    payment_for_future_value,
    payout_from_capital,
    present_value_annuity,
)
from pension_gap_de.params import RateSet, clamp

TOP_UP_EPS = 1e-9  # top-up at or below this counts as "gap closed"


def to_display_money(nominal: float, inflation_factor: float, todays_purchasing_power: bool) -> float:
    """Express a nominal retirement-date amount in the selected display terms."""
    return nominal / inflation_factor if todays_purchasing_power else nominal


def coverage_ratio(desired_saving: float, top_up: Payment) -> float:
    """Share of the savings need already covered by the planned rate, in [0, 1].

    Exactly 1 only when no top-up is needed; a large planned rate alone
    never reaches 1 while a residual top-up remains.
    """
    if isinstance(top_up, Unbounded):
        return 0.0
    t = max(0.0, top_up.value)
    if t <= TOP_UP_EPS:
        return 1.0
    denom = desired_saving + t
    if not math.isfinite(denom) or denom <= 0:
        return 0.0
    return clamp(desired_saving / denom, 0.0, 1.0)


@dataclass(frozen=True)
class GapSolution:
    private_capital: float        # FV of the planned savings at retirement
    private_payout: float         # monthly payout from that capital
    target_inflated: float        # target in retirement-date money
    target_display: float
    statutory_net_display: float
    shortfall: float              # in display terms
    required_capital: float
    required_saving: Payment      # top-up on top of desired_saving
    coverage: float


def solve_gap(
    *,
    statutory_net_nominal: float,
    target_net_today: float,
    desired_saving: float,
    months_to_retirement: int,
    retirement_months: int,
    rates: RateSet,
    inflation_factor: float,
    todays_purchasing_power: bool,
) -> GapSolution:
    """Compare projected income with the target and solve for the missing capital.

    In purchasing-power mode the returns in `rates` are already real, so
    the private payout is in today's money; only the nominal statutory
    pension needs deflating.
    """
    private_capital = future_value_annuity(desired_saving, rates.accumulation_monthly, months_to_retirement)
    private_payout = payout_from_capital(private_capital, rates.decumulation_monthly, retirement_months)

    target_inflated = target_net_today * inflation_factor
    target_display = target_net_today if todays_purchasing_power else target_inflated
    statutory_display = to_display_money(statutory_net_nominal, inflation_factor, todays_purchasing_power)

    shortfall = max(0.0, target_display - (statutory_display + private_payout))
    required_capital = present_value_annuity(shortfall, rates.decumulation_monthly, retirement_months)
    top_up = payment_for_future_value(required_capital, rates.accumulation_monthly, months_to_retirement)

    return GapSolution(
        private_capital=private_capital,
        private_payout=private_payout,
        target_inflated=target_inflated,
        target_display=target_display,
        statutory_net_display=statutory_display,
        shortfall=shortfall,
        required_capital=required_capital,
        required_saving=top_up,
        coverage=coverage_ratio(desired_saving, top_up),
    )
