"""TOML config loader with CLI > config > default resolution."""

import argparse
import dataclasses
import sys
import tomllib
from datetime import date
from pathlib import Path
from typing import Callable

from pension_gap_de.params import (
    Calibration,
    EconomicAssumptions,
    GermanState,
    HealthInsurance,
    PersonalInputs,
    calibration_fields,
)

DEFAULT_CONFIG_PATH = Path("config.toml")

# Rates are given in percent here (as on the sliders), fractions internally.
DEFAULTS = {
    "birth_date": "2000-01-01",
    "career_start": "2020-01-01",
    "state": "bayern",
    "monthly_gross": 0.0,
    "church_tax": False,
    "retirement_age": 67,
    "life_expectancy": 88,
    "health_insurance": "legal",
    "kvdr": True,
    "private_premium": 450.0,
    "target_net": 0.0,
    "desired_saving": 0.0,
    "inflation": 2.0,
    "return_saving": 7.0,
    "return_payout": 2.0,
    "purchasing_power": False,
}


def _fail(message: str):
    print(message, file=sys.stderr)
    raise SystemExit(1)


def load_config(path: Path | None = None) -> dict:
    """Load TOML config file. Returns empty dict if file doesn't exist."""
    if path is None:
        path = DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        _fail(f"Konfigurationsdatei konnte nicht gelesen werden: {path}: {e}")
    # TOML dates arrive as datetime.date → keep the ISO string form of DEFAULTS
    for key in ("birth_date", "career_start"):
        if isinstance(raw.get(key), date):
            raw[key] = raw[key].isoformat()
    return raw


def create_parser(description: str) -> argparse.ArgumentParser:
    """Create argparse parser with shared projection flags."""
    d = DEFAULTS
    states = ", ".join(s.value for s in GermanState)
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--config", type=Path, default=None, help="Konfigurationsdatei (default: config.toml)")
    parser.add_argument("--today", type=str, default=None, help="Stichtag YYYY-MM-DD (default: heute)")
    parser.add_argument("--birth-date", type=str, default=None, help=f"Geburtsdatum YYYY-MM-DD (default: {d['birth_date']})")
    parser.add_argument("--career-start", type=str, default=None, help=f"Berufseintritt YYYY-MM-DD (default: {d['career_start']})")
    parser.add_argument("--state", type=str, default=None, help=f"Bundesland: {states} (default: {d['state']})")
    parser.add_argument("--monthly-gross", type=float, default=None, help=f"Brutto / Monat in EUR (default: {d['monthly_gross']:.0f})")
    parser.add_argument("--church-tax", action=argparse.BooleanOptionalAction, default=None, help="kirchensteuerpflichtig (default: nein)")
    parser.add_argument("--retirement-age", type=int, default=None, help=f"Renteneintrittsalter 55-75 (default: {d['retirement_age']})")
    parser.add_argument("--life-expectancy", type=int, default=None, help=f"Lebenserwartung 70-100 (default: {d['life_expectancy']})")
    parser.add_argument("--health-insurance", type=str, default=None, help=f"Krankenversicherung: legal, private (default: {d['health_insurance']})")
    parser.add_argument("--kvdr", action=argparse.BooleanOptionalAction, default=None, help="Krankenversicherung der Rentner, nur gesetzlich (default: ja)")
    parser.add_argument("--private-premium", type=float, default=None, help=f"PKV-Beitrag / Monat heute in EUR (default: {d['private_premium']:.0f})")
    parser.add_argument("--target-net", type=float, default=None, help=f"Versorgungsziel netto / Monat in heutigem Geld (default: {d['target_net']:.0f})")
    parser.add_argument("--desired-saving", type=float, default=None, help=f"geplante Sparrate / Monat in EUR (default: {d['desired_saving']:.0f})")
    parser.add_argument("--inflation", type=float, default=None, help=f"Inflation in %% (default: {d['inflation']})")
    parser.add_argument("--return-saving", type=float, default=None, help=f"Rendite Ansparphase in %% (default: {d['return_saving']})")
    parser.add_argument("--return-payout", type=float, default=None, help=f"Rendite Entnahmephase in %% (default: {d['return_payout']})")
    parser.add_argument("--purchasing-power", action=argparse.BooleanOptionalAction, default=None, help="Werte in heutiger Kaufkraft anzeigen (default: aus)")
    return parser


def resolve(args: argparse.Namespace, config: dict) -> dict:
    """Resolve values with priority: CLI flag > config.toml > hardcoded default."""
    resolved = {}
    for key, default in DEFAULTS.items():
        cli_val = getattr(args, key, None)
        resolved[key] = cli_val if cli_val is not None else config.get(key, default)
    return resolved


def parse_date(s: str | date, key: str = "date") -> date:
    if isinstance(s, date):
        return s
    try:
        return date.fromisoformat(str(s).strip())
    except ValueError:
        _fail(f"Ungültiges Datum für {key}: {s!r} (erwartet YYYY-MM-DD)")


def parse_state(s: str) -> GermanState:
    try:
        return GermanState(str(s).strip().lower())
    except ValueError:
        valid = ", ".join(st.value for st in GermanState)
        _fail(f"Unbekanntes Bundesland: {s!r} (gültig: {valid})")


def parse_health_insurance(s: str) -> HealthInsurance:
    try:
        return HealthInsurance(str(s).strip().lower())
    except ValueError:
        _fail(f"Unbekannte Krankenversicherung: {s!r} (gültig: legal, private)")


def build_inputs(r: dict) -> PersonalInputs:
    """Build PersonalInputs from resolved config dict. Negative amounts are floored at 0."""
    return PersonalInputs(
        birth_date=parse_date(r["birth_date"], "birth_date"),
        career_start=parse_date(r["career_start"], "career_start"),
        state=parse_state(r["state"]),
        monthly_gross=max(0.0, float(r["monthly_gross"])),
        church_tax=bool(r["church_tax"]),
        retirement_age=int(r["retirement_age"]),
        life_expectancy=int(r["life_expectancy"]),
        health_insurance=parse_health_insurance(r["health_insurance"]),
        reduced_contribution=bool(r["kvdr"]),
        private_premium=max(0.0, float(r["private_premium"])),
        target_net_today=max(0.0, float(r["target_net"])),
        desired_saving=max(0.0, float(r["desired_saving"])),
    )


def build_assumptions(r: dict) -> EconomicAssumptions:
    """Build EconomicAssumptions; percent → fraction."""
    return EconomicAssumptions(
        inflation=float(r["inflation"]) / 100,
        accumulation_return=float(r["return_saving"]) / 100,
        decumulation_return=float(r["return_payout"]) / 100,
        todays_purchasing_power=bool(r["purchasing_power"]),
    )


def build_calibration(config: dict) -> Calibration:
    """Apply a [calibration] table from the config on top of the defaults."""
    overrides = dict(config.get("calibration", {}))
    unknown = set(overrides) - calibration_fields()
    if unknown:
        _fail(f"Unbekannte Kalibrierungsschlüssel: {', '.join(sorted(unknown))}")
    if "delay_horizons" in overrides:
        overrides["delay_horizons"] = tuple(int(x) for x in overrides["delay_horizons"])
    if "church_tax_reduced_states" in overrides:
        overrides["church_tax_reduced_states"] = tuple(
            parse_state(s) for s in overrides["church_tax_reduced_states"]
        )
    return dataclasses.replace(Calibration(), **overrides)


def resolve_today(args: argparse.Namespace) -> date:
    """Reference date: --today or the wall clock. Only CLIs call this."""
    if getattr(args, "today", None):
        return parse_date(args.today, "today")
    return date.today()


def parse_args(
    description: str,
    add_args_fn: "Callable[[argparse.ArgumentParser], None] | None" = None,
) -> tuple[dict, PersonalInputs, EconomicAssumptions, Calibration, date, argparse.Namespace]:
    """Parse CLI args, load config, resolve values.

    Returns (resolved_dict, inputs, assumptions, calibration, today, namespace).
    namespace: raw argparse.Namespace (for extra CLI args added via add_args_fn).
    """
    parser = create_parser(description)
    if add_args_fn:
        add_args_fn(parser)
    args = parser.parse_args()
    config = load_config(args.config)
    r = resolve(args, config)
    return (
        r,
        build_inputs(r),
        build_assumptions(r),
        build_calibration(config),
        resolve_today(args),
        args,
    )
