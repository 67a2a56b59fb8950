"""Projection engine: inputs → timeline → statutory pension → deductions → gap → horizons."""

import math
from dataclasses import dataclass
from datetime import date
from enum import Enum

from pension_gap_de.annuity import Payment
from pension_gap_de.params import (
    DEFAULT_CALIBRATION,
    Calibration,
    EconomicAssumptions,
    PersonalInputs,
    RateSet,
    resolve_rates,
    sanitize_inputs,
)
from pension_gap_de.sensitivity import HorizonProjection, project_horizons
from pension_gap_de.solver import GapSolution, solve_gap
from pension_gap_de.statutory import StatutoryPension, estimate_statutory_pension
from pension_gap_de.tax import NetPension, estimate_net_pension
from pension_gap_de.timeaxis import Timeline, build_timeline, plausible_age, years_between

# Bar colors
COLOR_TARGET = "#98a2b3"
COLOR_TARGET_INFLATED = "#667085"
COLOR_STATUTORY = "#1f6feb"
COLOR_PRIVATE = "#16a34a"
COLOR_GAP = "#ef4444"

LABEL_TARGET = "Versorgungsziel"
LABEL_TARGET_INFLATED = "Ziel mit Inflation"
LABEL_PENSION = "Rente"
LABEL_PENSION_TODAY = "Rente (heute)"
LABEL_STATUTORY = "Gesetzliche Rente Netto"
LABEL_PRIVATE = "Private Rente"
LABEL_GAP = "Versorgungslücke"


class DomainErrorKind(Enum):
    BIRTH_DATE_IMPLAUSIBLE = "birth date implausible"
    RETIREMENT_IN_PAST = "retirement date in the past"


@dataclass(frozen=True)
class DomainError:
    kind: DomainErrorKind

    @property
    def message(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class BarSegment:
    label: str
    value: float
    color: str


@dataclass(frozen=True)
class Bar:
    title: str
    segments: tuple[BarSegment, ...]

    @property
    def total(self) -> float:
        return sum(max(0.0, s.value) for s in self.segments)


@dataclass(frozen=True)
class ProjectionResult:
    timeline: Timeline
    rates: RateSet
    inflation_factor: float
    statutory: StatutoryPension
    net_pension: NetPension
    gap: GapSolution
    horizons: tuple[HorizonProjection, ...]   # now, then each delay horizon
    todays_purchasing_power: bool
    needs_input_hint: bool
    bars: tuple[Bar, ...]

    @property
    def months_to_retirement(self) -> int:
        return self.timeline.months_to_retirement

    @property
    def years_to_retirement(self) -> float:
        return self.timeline.years_to_retirement

    @property
    def retirement_months(self) -> int:
        return self.timeline.retirement_months

    @property
    def statutory_gross(self) -> float:
        return self.statutory.gross_monthly

    @property
    def statutory_net(self) -> float:
        """Net statutory pension in display terms."""
        return self.gap.statutory_net_display

    @property
    def private_payout(self) -> float:
        return self.gap.private_payout

    @property
    def shortfall(self) -> float:
        return self.gap.shortfall

    @property
    def required_capital(self) -> float:
        return self.gap.required_capital

    @property
    def required_saving(self) -> Payment:
        return self.gap.required_saving

    @property
    def coverage(self) -> float:
        return self.gap.coverage

    @property
    def delayed_horizons(self) -> tuple[HorizonProjection, ...]:
        return self.horizons[1:]

    @property
    def total_pension(self) -> float:
        """Gesamtrente: displayed statutory net plus private payout."""
        total = self.gap.statutory_net_display + self.gap.private_payout
        return total if math.isfinite(total) else 0.0


ProjectionOutcome = ProjectionResult | DomainError


def build_bars(gap: GapSolution, target_net_today: float, todays_purchasing_power: bool) -> tuple[Bar, ...]:
    """Chart-ready bars: target, inflated target (nominal mode only), pension stack."""
    bars = [Bar(LABEL_TARGET, (BarSegment(LABEL_TARGET, target_net_today, COLOR_TARGET),))]
    if not todays_purchasing_power:
        bars.append(Bar(
            LABEL_TARGET_INFLATED,
            (BarSegment(LABEL_TARGET_INFLATED, gap.target_inflated, COLOR_TARGET_INFLATED),),
        ))
    bars.append(Bar(
        LABEL_PENSION_TODAY if todays_purchasing_power else LABEL_PENSION,
        (
            BarSegment(LABEL_STATUTORY, gap.statutory_net_display, COLOR_STATUTORY),
            BarSegment(LABEL_PRIVATE, gap.private_payout, COLOR_PRIVATE),
            BarSegment(LABEL_GAP, gap.shortfall, COLOR_GAP),
        ),
    ))
    return tuple(bars)


def project_retirement(
    inputs: PersonalInputs,
    assumptions: EconomicAssumptions,
    today: date,
    calibration: Calibration = DEFAULT_CALIBRATION,
) -> ProjectionOutcome:
    """Run the full projection for one set of inputs.

    Pure: `today` is the only notion of time. Returns DomainError for an
    implausible birth date or a retirement date not in the future.
    """
    inputs = sanitize_inputs(inputs)
    rates = resolve_rates(assumptions, calibration)

    # Checked before the timeline: add_years overflows for far-future birth dates
    if not plausible_age(years_between(inputs.birth_date, today), calibration):
        return DomainError(DomainErrorKind.BIRTH_DATE_IMPLAUSIBLE)
    timeline = build_timeline(inputs, today, calibration)
    if timeline.months_to_retirement <= 0:
        return DomainError(DomainErrorKind.RETIREMENT_IN_PAST)

    inflation_factor = (1 + rates.inflation) ** timeline.years_to_retirement

    statutory = estimate_statutory_pension(
        inputs.monthly_gross,
        timeline.work_years,
        timeline.years_to_retirement,
        rates.inflation,
        calibration,
    )
    net = estimate_net_pension(
        statutory.gross_monthly,
        inputs,
        timeline.retirement_year,
        timeline.years_to_retirement,
        calibration,
    )
    gap = solve_gap(
        statutory_net_nominal=net.net_monthly,
        target_net_today=inputs.target_net_today,
        desired_saving=inputs.desired_saving,
        months_to_retirement=timeline.months_to_retirement,
        retirement_months=timeline.retirement_months,
        rates=rates,
        inflation_factor=inflation_factor,
        todays_purchasing_power=assumptions.todays_purchasing_power,
    )
    horizons = project_horizons(
        calibration.delay_horizons,
        gap.required_capital,
        inputs.desired_saving,
        timeline.months_to_retirement,
        rates.accumulation_monthly,
    )

    return ProjectionResult(
        timeline=timeline,
        rates=rates,
        inflation_factor=inflation_factor,
        statutory=statutory,
        net_pension=net,
        gap=gap,
        horizons=tuple(horizons),
        todays_purchasing_power=assumptions.todays_purchasing_power,
        needs_input_hint=(
            inputs.monthly_gross <= 0 and inputs.target_net_today <= 0 and inputs.desired_saving <= 0
        ),
        bars=build_bars(gap, inputs.target_net_today, assumptions.todays_purchasing_power),
    )
