"""What-if: starting to save later (in 4 / 8 years instead of now)."""

from dataclasses import dataclass

from pension_gap_de.annuity import Payment, future_value_annuity, payment_for_future_value


@dataclass(frozen=True)
class HorizonProjection:
    delay_years: int
    months_remaining: int       # may be negative once the delay passes retirement
    required_saving: Payment    # top-up to still reach the fixed required capital
    capital: float              # FV of desired_saving over the remaining months
    contributions: float
    interest: float             # Zinsgewinn = capital - contributions


def project_horizon(
    delay_years: int,
    required_capital: float,
    desired_saving: float,
    months_to_retirement: int,
    monthly_rate: float,
) -> HorizonProjection:
    """Shorten the accumulation window by the delay; the capital target stays fixed."""
    if delay_years < 0:
        raise ValueError(f"delay must not be negative: {delay_years}")
    months = months_to_retirement - delay_years * 12
    capital = future_value_annuity(desired_saving, monthly_rate, months)
    contributions = desired_saving * max(0, months)
    return HorizonProjection(
        delay_years=delay_years,
        months_remaining=months,
        required_saving=payment_for_future_value(required_capital, monthly_rate, months),
        capital=capital,
        contributions=contributions,
        interest=capital - contributions,
    )


def project_horizons(
    delays: tuple[int, ...],
    required_capital: float,
    desired_saving: float,
    months_to_retirement: int,
    monthly_rate: float,
) -> list[HorizonProjection]:
    """Horizon for starting now (delay 0) followed by each delay in order."""
    return [
        project_horizon(d, required_capital, desired_saving, months_to_retirement, monthly_rate)
        for d in (0, *delays)
    ]
