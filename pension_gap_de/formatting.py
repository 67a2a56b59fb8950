"""German display formatting (de-DE)."""

import math
from datetime import date

from pension_gap_de.annuity import Payment, payment_value

PLACEHOLDER = "–"


def _de_number(value: float, frac: int) -> str:
    # 1,234,567.89 → 1.234.567,89
    return f"{value:,.{frac}f}".replace(",", "_").replace(".", ",").replace("_", ".")


def fmt_eur(value: float | Payment, frac: int = 0) -> str:
    """Format as EUR, e.g. 1.234,56 €. Non-finite and unbounded values → "–"."""
    if not isinstance(value, (int, float)):
        value = payment_value(value)
    if not math.isfinite(value):
        return PLACEHOLDER
    return f"{_de_number(value, frac)} €"


def fmt_pct(ratio: float, frac: int = 0) -> str:
    if not math.isfinite(ratio):
        return PLACEHOLDER
    return f"{ratio * 100:.{frac}f}%"


def format_de_date(d: date) -> str:
    return f"{d.day:02d}.{d.month:02d}.{d.year}"
