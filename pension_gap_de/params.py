"""Projection inputs, economic assumptions and calibration constants."""

import dataclasses
from dataclasses import dataclass
from datetime import date
from enum import Enum


class GermanState(str, Enum):
    """Bundesland. Only the church tax rate depends on it."""

    BADEN_WUERTTEMBERG = "baden_wuerttemberg"
    BAYERN = "bayern"
    BERLIN = "berlin"
    BRANDENBURG = "brandenburg"
    BREMEN = "bremen"
    HAMBURG = "hamburg"
    HESSEN = "hessen"
    MECKLENBURG_VORPOMMERN = "mecklenburg_vorpommern"
    NIEDERSACHSEN = "niedersachsen"
    NORDRHEIN_WESTFALEN = "nordrhein_westfalen"
    RHEINLAND_PFALZ = "rheinland_pfalz"
    SAARLAND = "saarland"
    SACHSEN = "sachsen"
    SACHSEN_ANHALT = "sachsen_anhalt"
    SCHLESWIG_HOLSTEIN = "schleswig_holstein"
    THUERINGEN = "thueringen"

    @property
    def label(self) -> str:
        return STATE_LABELS[self]


STATE_LABELS: dict[GermanState, str] = {
    GermanState.BADEN_WUERTTEMBERG: "Baden-Württemberg",
    GermanState.BAYERN: "Bayern",
    GermanState.BERLIN: "Berlin",
    GermanState.BRANDENBURG: "Brandenburg",
    GermanState.BREMEN: "Bremen",
    GermanState.HAMBURG: "Hamburg",
    GermanState.HESSEN: "Hessen",
    GermanState.MECKLENBURG_VORPOMMERN: "Mecklenburg-Vorpommern",
    GermanState.NIEDERSACHSEN: "Niedersachsen",
    GermanState.NORDRHEIN_WESTFALEN: "Nordrhein-Westfalen",
    GermanState.RHEINLAND_PFALZ: "Rheinland-Pfalz",
    GermanState.SAARLAND: "Saarland",
    GermanState.SACHSEN: "Sachsen",
    GermanState.SACHSEN_ANHALT: "Sachsen-Anhalt",
    GermanState.SCHLESWIG_HOLSTEIN: "Schleswig-Holstein",
    GermanState.THUERINGEN: "Thüringen",
}


class HealthInsurance(str, Enum):
    LEGAL = "legal"      # GKV
    PRIVATE = "private"  # PKV


# Input bounds
MIN_RETIREMENT_AGE = 55
MAX_RETIREMENT_AGE = 75
MIN_LIFE_EXPECTANCY = 70
MAX_LIFE_EXPECTANCY = 100


def clamp(value: float, lo: float, hi: float) -> float:
    return min(hi, max(lo, value))


@dataclass(frozen=True)
class Calibration:
    """Calibration knobs (tool-grade approximations, not statutory values).

    All money amounts in EUR. Override individual fields with
    dataclasses.replace() or a [calibration] table in config.toml.
    """

    # Gesetzliche Rentenversicherung
    average_earnings: float = 50000.0      # Durchschnittsentgelt (EUR/Jahr)
    contribution_ceiling: float = 90600.0  # Beitragsbemessungsgrenze (EUR/Jahr, fixed)
    pension_value: float = 39.32           # aktueller Rentenwert (EUR je Entgeltpunkt)
    pension_value_growth: float = 0.01
    earnings_point_cap: float = 2.05       # max. Entgeltpunkte pro Jahr
    real_wage_premium: float = 0.01        # wage growth = inflation + 1%
    max_wage_growth: float = 0.06

    # Kranken- und Pflegeversicherung
    health_general_rate: float = 0.146      # allgemeiner Beitragssatz (gesamt)
    health_supplement_rate: float = 0.016   # Zusatzbeitrag (gesamt)
    care_rate: float = 0.034                # Pflegeversicherung (gesamt)
    private_premium_growth: float = 0.03    # PKV-Beitragssteigerung

    # Einkommensteuer (smoothed §32a EStG)
    tax_free_allowance: float = 12000.0     # Grundfreibetrag
    band1_upper: float = 17000.0
    band2_upper: float = 66000.0
    band3_upper: float = 277000.0
    band1_base_rate: float = 0.14
    band1_ramp: float = 0.10
    band2_base_rate: float = 0.24
    band2_ramp: float = 0.18
    band3_rate: float = 0.42
    band4_rate: float = 0.45

    # Kirchensteuer
    church_tax_rate_reduced: float = 0.08
    church_tax_rate: float = 0.09
    church_tax_reduced_states: tuple[GermanState, ...] = (
        GermanState.BAYERN,
        GermanState.BADEN_WUERTTEMBERG,
    )

    # Rate caps (fractions)
    max_inflation: float = 0.20
    max_return: float = 0.30
    min_real_return: float = -0.99

    # Time axis
    min_plausible_age: int = 0
    max_plausible_age: int = 110
    min_retirement_years: float = 5
    max_retirement_years: float = 45

    # Sensitivity: delayed savings start (years)
    delay_horizons: tuple[int, ...] = (4, 8)


DEFAULT_CALIBRATION = Calibration()


@dataclass(frozen=True)
class PersonalInputs:
    """Personal data as entered; see sanitize_inputs() for the boundary rules."""

    birth_date: date = date(2000, 1, 1)
    career_start: date = date(2020, 1, 1)
    state: GermanState = GermanState.BAYERN
    monthly_gross: float = 0.0          # Bruttoeinkommen heute (EUR/Monat)
    church_tax: bool = False
    retirement_age: int = 67
    life_expectancy: int = 88
    health_insurance: HealthInsurance = HealthInsurance.LEGAL
    reduced_contribution: bool = True   # KVdR (legal only)
    private_premium: float = 450.0      # PKV-Beitrag heute (EUR/Monat)
    target_net_today: float = 0.0       # Versorgungsziel netto in heutigem Geld
    desired_saving: float = 0.0         # geplante Sparrate (EUR/Monat)


@dataclass(frozen=True)
class EconomicAssumptions:
    """Annual rates as fractions (0.02 = 2%), clamped by resolve_rates()."""

    inflation: float = 0.02
    accumulation_return: float = 0.07
    decumulation_return: float = 0.02
    # True: show everything in today's purchasing power (real returns)
    todays_purchasing_power: bool = False


@dataclass(frozen=True)
class RateSet:
    """Clamped, mode-adjusted annual rates plus their monthly equivalents."""

    inflation: float
    accumulation: float
    decumulation: float

    @property
    def accumulation_monthly(self) -> float:
        return self.accumulation / 12

    @property
    def decumulation_monthly(self) -> float:
        return self.decumulation / 12


def sanitize_inputs(inputs: PersonalInputs) -> PersonalInputs:
    """Floor money amounts at zero and clamp ages to their bounds.

    Returns a new PersonalInputs; the argument is left untouched.
    """
    return dataclasses.replace(
        inputs,
        monthly_gross=max(0.0, inputs.monthly_gross),
        private_premium=max(0.0, inputs.private_premium),
        target_net_today=max(0.0, inputs.target_net_today),
        desired_saving=max(0.0, inputs.desired_saving),
        retirement_age=int(clamp(inputs.retirement_age, MIN_RETIREMENT_AGE, MAX_RETIREMENT_AGE)),
        life_expectancy=int(clamp(inputs.life_expectancy, MIN_LIFE_EXPECTANCY, MAX_LIFE_EXPECTANCY)),
    )


def resolve_rates(
    assumptions: EconomicAssumptions,
    calibration: Calibration = DEFAULT_CALIBRATION,
) -> RateSet:
    """Clamp rates to [0, cap]; subtract inflation in purchasing-power mode."""
    inflation = clamp(assumptions.inflation, 0.0, calibration.max_inflation)
    acc = clamp(assumptions.accumulation_return, 0.0, calibration.max_return)
    dec = clamp(assumptions.decumulation_return, 0.0, calibration.max_return)
    if assumptions.todays_purchasing_power:
        acc = max(calibration.min_real_return, acc - inflation)
        dec = max(calibration.min_real_return, dec - inflation)
    return RateSet(inflation=inflation, accumulation=acc, decumulation=dec)


def calibration_fields() -> set[str]:
    """Names of the overridable Calibration fields."""
    return {f.name for f in dataclasses.fields(Calibration)}
