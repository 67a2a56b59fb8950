"""Tests for config loading and resolution."""

import argparse
from datetime import date

import pytest
from pension_gap_de.config import (
    DEFAULTS,
    build_assumptions,
    build_calibration,
    build_inputs,
    create_parser,
    load_config,
    parse_state,
    resolve,
    resolve_today,
)
from pension_gap_de.params import GermanState, HealthInsurance


class TestLoadConfig:
    def test_missing_file(self, tmp_path):
        assert load_config(tmp_path / "nope.toml") == {}

    def test_toml_dates_become_iso_strings(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('birth_date = 1985-03-15\nstate = "berlin"\nmonthly_gross = 4200\n', encoding="utf-8")
        raw = load_config(path)
        assert raw["birth_date"] == "1985-03-15"
        assert raw["state"] == "berlin"

    def test_invalid_toml(self, tmp_path, capsys):
        path = tmp_path / "config.toml"
        path.write_text("birth_date = = 1", encoding="utf-8")
        with pytest.raises(SystemExit):
            load_config(path)
        assert "config.toml" in capsys.readouterr().err


class TestResolve:
    def test_priority(self):
        parser = create_parser("test")
        args = parser.parse_args(["--monthly-gross", "5000", "--no-kvdr"])
        config = {"monthly_gross": 3000, "target_net": 2500}
        r = resolve(args, config)
        assert r["monthly_gross"] == 5000        # CLI
        assert r["target_net"] == 2500           # config
        assert r["kvdr"] is False                # CLI negation
        assert r["inflation"] == DEFAULTS["inflation"]  # default

    def test_today_flag(self):
        parser = create_parser("test")
        args = parser.parse_args(["--today", "2026-10-19"])
        assert resolve_today(args) == date(2026, 10, 19)

    def test_today_defaults_to_wall_clock(self):
        assert resolve_today(argparse.Namespace(today=None)) == date.today()


class TestBuildInputs:
    def test_defaults(self):
        inputs = build_inputs(dict(DEFAULTS))
        assert inputs.birth_date == date(2000, 1, 1)
        assert inputs.state == GermanState.BAYERN
        assert inputs.health_insurance == HealthInsurance.LEGAL
        assert inputs.reduced_contribution is True

    def test_negative_amounts_floored(self):
        r = dict(DEFAULTS, monthly_gross=-10, desired_saving=-5)
        inputs = build_inputs(r)
        assert inputs.monthly_gross == 0
        assert inputs.desired_saving == 0

    def test_invalid_date(self):
        with pytest.raises(SystemExit):
            build_inputs(dict(DEFAULTS, birth_date="01.01.2000"))

    def test_invalid_state(self):
        with pytest.raises(SystemExit):
            parse_state("bavaria")

    def test_state_case_insensitive(self):
        assert parse_state("Hessen") == GermanState.HESSEN
        assert parse_state(" NORDRHEIN_WESTFALEN ") == GermanState.NORDRHEIN_WESTFALEN


class TestBuildAssumptions:
    def test_percent_to_fraction(self):
        a = build_assumptions(dict(DEFAULTS, inflation=2.5, purchasing_power=True))
        assert a.inflation == pytest.approx(0.025)
        assert a.accumulation_return == pytest.approx(0.07)
        assert a.decumulation_return == pytest.approx(0.02)
        assert a.todays_purchasing_power is True


class TestBuildCalibration:
    def test_no_table(self):
        cal = build_calibration({})
        assert cal.pension_value == pytest.approx(39.32)

    def test_overrides(self):
        cal = build_calibration({"calibration": {
            "pension_value": 40.79,
            "delay_horizons": [5, 10],
            "church_tax_reduced_states": ["bayern"],
        }})
        assert cal.pension_value == pytest.approx(40.79)
        assert cal.delay_horizons == (5, 10)
        assert cal.church_tax_reduced_states == (GermanState.BAYERN,)
        assert cal.contribution_ceiling == pytest.approx(90600)

    def test_unknown_key(self, capsys):
        with pytest.raises(SystemExit):
            build_calibration({"calibration": {"rentenwert": 40.0}})
        assert "rentenwert" in capsys.readouterr().err
