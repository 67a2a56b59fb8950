"""Scenario definitions and multi-scenario execution."""

import dataclasses
from datetime import date

from pension_gap_de.engine import ProjectionOutcome, project_retirement
from pension_gap_de.params import (
    DEFAULT_CALIBRATION,
    Calibration,
    EconomicAssumptions,
    PersonalInputs,
)

SCENARIOS = {
    "Pessimistisch": {
        "inflation": 0.03,
        "accumulation_return": 0.04,
        "decumulation_return": 0.01,
    },
    "Standard": {
        "inflation": 0.02,
        "accumulation_return": 0.07,
        "decumulation_return": 0.02,
    },
    "Optimistisch": {
        "inflation": 0.015,
        "accumulation_return": 0.09,
        "decumulation_return": 0.03,
    },
}


def run_scenarios(
    inputs: PersonalInputs,
    today: date,
    base_assumptions: EconomicAssumptions | None = None,
    calibration: Calibration = DEFAULT_CALIBRATION,
) -> dict[str, ProjectionOutcome]:
    """Project the same person under every scenario.

    The purchasing-power toggle of base_assumptions is kept; the scenario
    overrides only the three rates.
    """
    base = base_assumptions or EconomicAssumptions()
    return {
        name: project_retirement(inputs, dataclasses.replace(base, **overrides), today, calibration)
        for name, overrides in SCENARIOS.items()
    }
