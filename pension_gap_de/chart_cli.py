"""CLI entry point for chart generation."""

import sys
from pathlib import Path

from pension_gap_de.charts import plot_breakdown, plot_scenarios
from pension_gap_de.cli import ERROR_MESSAGES
from pension_gap_de.engine import DomainError, project_retirement
from pension_gap_de.config import parse_args
from pension_gap_de.scenarios import run_scenarios


def _add_chart_args(parser):
    parser.add_argument(
        "--output", type=Path, default=Path("reports/charts"),
        help="Ausgabeverzeichnis (default: reports/charts)",
    )
    parser.add_argument(
        "--name", type=str, default="",
        help="Suffix für Dateinamen (z.B. a → breakdown-a.png)",
    )
    parser.add_argument(
        "--scenarios", action="store_true",
        help="zusätzlich Szenariovergleich zeichnen",
    )


def main():
    _, inputs, assumptions, calibration, today, args = parse_args(
        "Altersvorsorge: Diagramme erzeugen", _add_chart_args,
    )

    print("Projektion...", file=sys.stderr)
    result = project_retirement(inputs, assumptions, today, calibration)
    if isinstance(result, DomainError):
        print(f"  {ERROR_MESSAGES[result.kind]}", file=sys.stderr)
        raise SystemExit(1)
    path = plot_breakdown(result, args.output, name=args.name)
    print(f"  → {path}", file=sys.stderr)

    if args.scenarios:
        print("Szenarien...", file=sys.stderr)
        outcomes = run_scenarios(inputs, today, assumptions, calibration)
        path = plot_scenarios(outcomes, args.output, name=args.name)
        print(f"  → {path}", file=sys.stderr)

    print("Fertig", file=sys.stderr)


if __name__ == "__main__":
    main()
