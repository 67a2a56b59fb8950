"""CLI entry point for scenario comparison."""

from pension_gap_de.cli import ERROR_MESSAGES
from pension_gap_de.config import parse_args
from pension_gap_de.engine import DomainError
from pension_gap_de.formatting import fmt_eur, fmt_pct
from pension_gap_de.scenarios import SCENARIOS, run_scenarios


def print_parameters():
    """Print scenario parameters"""
    print("=" * 96)
    print("【Szenarioparameter】")
    print("-" * 96)
    print(f"{'Szenario':<16} {'Inflation':>10} {'Rendite Ansparen':>18} {'Rendite Entnahme':>18}")
    print("-" * 96)
    for name, s in SCENARIOS.items():
        print(
            f"{name:<16} {fmt_pct(s['inflation'], 1):>10} "
            f"{fmt_pct(s['accumulation_return'], 1):>18} {fmt_pct(s['decumulation_return'], 1):>18}"
        )
    print("-" * 96)
    print()


def print_results(outcomes: dict):
    print("=" * 96)
    print("【Szenariovergleich】")
    print("-" * 96)
    print(
        f"{'Szenario':<16} {'Nettorente':>12} {'Privatrente':>12} {'Lücke':>12} "
        f"{'Kapital':>14} {'Sparrate':>12} {'Abdeckung':>10}"
    )
    print("-" * 96)
    for name, r in outcomes.items():
        if isinstance(r, DomainError):
            print(f"{name:<16}  --- {ERROR_MESSAGES[r.kind]} ---")
            continue
        print(
            f"{name:<16} {fmt_eur(r.statutory_net):>12} {fmt_eur(r.private_payout):>12} "
            f"{fmt_eur(r.shortfall):>12} {fmt_eur(r.required_capital):>14} "
            f"{fmt_eur(r.required_saving):>12} {fmt_pct(r.coverage):>10}"
        )
    print("-" * 96)


def main():
    _, inputs, assumptions, calibration, today, _ = parse_args("Altersvorsorge: Szenariovergleich")
    print_parameters()
    print_results(run_scenarios(inputs, today, assumptions, calibration))


if __name__ == "__main__":
    main()
