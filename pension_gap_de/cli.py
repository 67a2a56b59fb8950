"""CLI entry point for a single projection report."""

from pension_gap_de.config import parse_args
from pension_gap_de.engine import DomainError, DomainErrorKind, ProjectionResult, project_retirement
from pension_gap_de.formatting import fmt_eur, fmt_pct, format_de_date
from pension_gap_de.params import EconomicAssumptions, HealthInsurance, PersonalInputs

ERROR_MESSAGES = {
    DomainErrorKind.BIRTH_DATE_IMPLAUSIBLE: "Geburtsdatum unplausibel.",
    DomainErrorKind.RETIREMENT_IN_PAST: "Renteneintritt liegt in der Vergangenheit.",
}


def _print_header(inputs: PersonalInputs, assumptions: EconomicAssumptions, result: ProjectionResult):
    t = result.timeline
    print("=" * 72)
    print(f"Altersvorsorge – Renteneintritt am {format_de_date(t.retirement_date)} "
          f"(in {t.years_to_retirement:.1f} Jahren, {t.months_to_retirement} Monate)")
    print(f"  Bundesland: {inputs.state.label} / Brutto: {fmt_eur(inputs.monthly_gross)} "
          f"/ Kirchensteuer: {'ja' if inputs.church_tax else 'nein'}")
    print(f"  Rentenbezug: {t.retirement_years:.0f} Jahre ({t.retirement_months} Monate)")
    if inputs.health_insurance == HealthInsurance.PRIVATE:
        print(f"  Krankenversicherung: privat, Beitrag heute {fmt_eur(inputs.private_premium)}")
    else:
        print(f"  Krankenversicherung: gesetzlich ({'KVdR' if inputs.reduced_contribution else 'freiwillig'})")
    r = result.rates
    mode = "heutige Kaufkraft (real)" if assumptions.todays_purchasing_power else "nominal"
    print(f"  Inflation {fmt_pct(r.inflation, 1)} / Rendite Ansparen {fmt_pct(r.accumulation, 1)} "
          f"/ Entnahme {fmt_pct(r.decumulation, 1)} – Darstellung {mode}")
    print("=" * 72)


def _print_pension(result: ProjectionResult):
    s = result.statutory
    n = result.net_pension
    print("\n【Gesetzliche Rente】")
    print(f"  Entgeltpunkte:        {s.earnings_points:>12.2f}")
    print(f"  Rentenwert:           {fmt_eur(s.pension_value, 2):>14}")
    print(f"  Bruttorente:          {fmt_eur(s.gross_monthly, 2):>14}")
    print(f"  Kranken/Pflege:      -{fmt_eur(n.health_deduction, 2):>14}")
    print(f"  Einkommensteuer:     -{fmt_eur(n.income_tax, 2):>14} "
          f"(Besteuerungsanteil {fmt_pct(n.taxable_share)})")
    if n.church_tax > 0:
        print(f"  Kirchensteuer:       -{fmt_eur(n.church_tax, 2):>14}")
    print(f"  Nettorente:           {fmt_eur(result.statutory_net, 2):>14}")


def _print_gap(result: ProjectionResult):
    g = result.gap
    print("\n【Versorgungslücke】")
    for bar in result.bars:
        parts = " + ".join(f"{seg.label} {fmt_eur(seg.value)}" for seg in bar.segments)
        print(f"  {bar.title:<20} {parts}")
    print(f"  Gesamtrente:          {fmt_eur(result.total_pension, 2):>14}")
    print(f"  Lücke:                {fmt_eur(g.shortfall, 2):>14}")
    print(f"  Benötigtes Kapital:   {fmt_eur(g.required_capital):>14}")
    print(f"  Notwendige Sparrate:  {fmt_eur(g.required_saving, 2):>14} (zusätzlich)")
    for h in result.delayed_horizons:
        print(f"    in {h.delay_years} Jahren:        {fmt_eur(h.required_saving, 2):>14}")
    print(f"  Abdeckung:            {fmt_pct(g.coverage):>14}")


def _print_horizons(result: ProjectionResult):
    print("\n【Investitionswunsch】")
    print(f"  {'Start':<10} {'Kapital':>16} {'Einzahlungen':>16} {'Zinsgewinn':>16}")
    for h in result.horizons:
        label = "Heute" if h.delay_years == 0 else f"In {h.delay_years} J."
        print(f"  {label:<10} {fmt_eur(h.capital):>16} {fmt_eur(h.contributions):>16} {fmt_eur(h.interest):>16}")


def main():
    """Execute a single projection and print the report."""
    _, inputs, assumptions, calibration, today, _ = parse_args("Altersvorsorge: Versorgungslücke berechnen")

    result = project_retirement(inputs, assumptions, today, calibration)
    if isinstance(result, DomainError):
        print(ERROR_MESSAGES[result.kind])
        raise SystemExit(1)

    _print_header(inputs, assumptions, result)
    if result.needs_input_hint:
        print("\nBitte Werte eingeben (Brutto, Versorgungsziel oder Sparrate), "
              "um eine realistische Gesamtrente zu sehen.")
    _print_pension(result)
    _print_gap(result)
    _print_horizons(result)


if __name__ == "__main__":
    main()
