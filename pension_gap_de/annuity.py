"""Annuity math on monthly rates (present value, future value, payments)."""

import math
from dataclasses import dataclass

ZERO_RATE_EPS = 1e-12  # below this |r| the linear (zero-rate) formulas apply


@dataclass(frozen=True)
class Bounded:
    value: float


@dataclass(frozen=True)
class Unbounded:
    """No finite level payment reaches the target (no periods left, or degenerate rate)."""


UNBOUNDED = Unbounded()

Payment = Bounded | Unbounded


def is_bounded(payment: Payment) -> bool:
    return isinstance(payment, Bounded)


def payment_value(payment: Payment) -> float:
    """Float view of a payment; math.inf for UNBOUNDED. Meant for display only."""
    if isinstance(payment, Bounded):
        return payment.value
    return math.inf


def present_value_annuity(pmt: float, rate: float, n: int) -> float:
    """Present value of n level payments at the end of each period."""
    if n <= 0:
        return 0.0
    if abs(rate) < ZERO_RATE_EPS:
        return pmt * n
    return pmt * (1 - (1 + rate) ** -n) / rate


def future_value_annuity(pmt: float, rate: float, n: int) -> float:
    """Future value of n level payments at the end of each period."""
    if n <= 0:
        return 0.0
    if abs(rate) < ZERO_RATE_EPS:
        return pmt * n
    return pmt * ((1 + rate) ** n - 1) / rate


def payment_for_future_value(fv: float, rate: float, n: int) -> Payment:
    """Level payment per period whose future value after n periods equals fv.

    Returns UNBOUNDED when no periods remain or when the compounding
    denominator is non-positive (negative-rate edge case).
    """
    if n <= 0:
        return UNBOUNDED
    if fv <= 0:
        return Bounded(0.0)
    if abs(rate) < ZERO_RATE_EPS:
        return Bounded(fv / n)
    denom = (1 + rate) ** n - 1
    if denom <= 0:
        return UNBOUNDED
    return Bounded(fv * rate / denom)


def payout_from_capital(capital: float, rate: float, n: int) -> float:
    """Monthly withdrawal a lump sum supports over n periods (Entnahmeplan)."""
    if capital <= 0 or n <= 0:
        return 0.0
    factor = present_value_annuity(1.0, rate, n)
    if factor <= 0:
        return 0.0
    return capital / factor
