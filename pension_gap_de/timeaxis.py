"""Calendar arithmetic: whole years/months between dates, retirement timeline."""

from dataclasses import dataclass
from datetime import date

from dateutil.relativedelta import relativedelta

from pension_gap_de.params import DEFAULT_CALIBRATION, Calibration, PersonalInputs, clamp


def years_between(a: date, b: date) -> int:
    """Whole years from a to b (one less if b's month/day precedes a's)."""
    years = b.year - a.year
    if (b.month, b.day) < (a.month, a.day):
        years -= 1
    return years


def months_between(a: date, b: date) -> int:
    """Whole months from a to b (one less if b's day-of-month precedes a's)."""
    months = (b.year - a.year) * 12 + (b.month - a.month)
    if b.day < a.day:
        months -= 1
    return months


def add_years(d: date, years: int) -> date:
    """Shift by whole years; 29 Feb rolls over to 1 Mar in non-leap years."""
    shifted = d + relativedelta(years=years)
    if (d.month, d.day) == (2, 29) and shifted.day == 28:
        shifted += relativedelta(days=1)
    return shifted


@dataclass(frozen=True)
class Timeline:
    current_age: int
    retirement_date: date
    months_to_retirement: int
    work_months: int
    retirement_years: float   # clamped payout duration
    retirement_months: int

    @property
    def years_to_retirement(self) -> float:
        """Fractional years, used for every compounding factor."""
        return self.months_to_retirement / 12

    @property
    def work_years(self) -> int:
        return self.work_months // 12

    @property
    def retirement_year(self) -> int:
        return self.retirement_date.year


def retirement_duration_years(
    retirement_age: int,
    life_expectancy: int,
    calibration: Calibration = DEFAULT_CALIBRATION,
) -> float:
    return clamp(
        life_expectancy - retirement_age,
        calibration.min_retirement_years,
        calibration.max_retirement_years,
    )


def build_timeline(
    inputs: PersonalInputs,
    today: date,
    calibration: Calibration = DEFAULT_CALIBRATION,
) -> Timeline:
    """Derive all spans for a projection.

    Does not validate; callers check plausible_age() and months_to_retirement.
    """
    retirement_date = add_years(inputs.birth_date, inputs.retirement_age)
    years = retirement_duration_years(inputs.retirement_age, inputs.life_expectancy, calibration)
    return Timeline(
        current_age=years_between(inputs.birth_date, today),
        retirement_date=retirement_date,
        months_to_retirement=months_between(today, retirement_date),
        work_months=max(0, months_between(inputs.career_start, retirement_date)),
        retirement_years=years,
        retirement_months=round(years * 12),
    )


def plausible_age(age: int, calibration: Calibration = DEFAULT_CALIBRATION) -> bool:
    return calibration.min_plausible_age <= age <= calibration.max_plausible_age
