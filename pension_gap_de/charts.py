"""Chart generation for projection results."""

from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.ticker as ticker

from pension_gap_de.engine import Bar, DomainError, ProjectionOutcome, ProjectionResult
from pension_gap_de.formatting import fmt_eur


def _format_eur_axis(ax: plt.Axes):
    ax.yaxis.set_major_formatter(
        ticker.FuncFormatter(lambda x, _: fmt_eur(x))
    )


def _draw_stacked_bars(ax: plt.Axes, bars: list[Bar], titles: list[str] | None = None):
    """Draw one stacked column per bar; zero segments are skipped."""
    titles = titles or [b.title for b in bars]
    seen_labels: set[str] = set()
    for x, bar in enumerate(bars):
        bottom = 0.0
        for seg in bar.segments:
            if seg.value <= 0:
                continue
            # Legend entry once per segment label
            label = seg.label if seg.label not in seen_labels else None
            seen_labels.add(seg.label)
            ax.bar(x, seg.value, bottom=bottom, color=seg.color, width=0.6, label=label)
            ax.text(
                x, bottom + seg.value / 2, fmt_eur(seg.value),
                ha="center", va="center", fontsize=10, color="white", fontweight="bold",
            )
            bottom += seg.value
    ax.set_xticks(range(len(bars)))
    ax.set_xticklabels(titles)
    ax.set_ylim(0, max([1.0] + [b.total for b in bars]) * 1.1)


def _save(fig, output_path: Path, stem: str, name: str) -> Path:
    output_path.mkdir(parents=True, exist_ok=True)
    suffix = f"-{name}" if name else ""
    filepath = output_path / f"{stem}{suffix}.png"
    fig.tight_layout()
    fig.savefig(filepath, dpi=150)
    plt.close(fig)
    return filepath


def plot_breakdown(result: ProjectionResult, output_path: Path, name: str = "") -> Path:
    """Stacked bar chart: target vs. statutory + private pension + gap.

    Args:
        result: successful projection.
        output_path: directory to save the PNG.
        name: optional suffix for the output filename (e.g. "a" → "breakdown-a.png").

    Returns:
        Path to the generated PNG file.
    """
    fig, ax = plt.subplots(figsize=(10, 7))
    _draw_stacked_bars(ax, list(result.bars))

    terms = "heutige Kaufkraft" if result.todays_purchasing_power else "nominal"
    ax.set_ylabel(f"EUR / Monat ({terms})")
    ax.set_title(f"Versorgungslücke – Gesamtrente {fmt_eur(result.total_pension, 2)}")
    ax.legend(loc="upper right")
    ax.grid(True, axis="y", alpha=0.3)
    _format_eur_axis(ax)
    return _save(fig, output_path, "breakdown", name)


def plot_scenarios(outcomes: dict[str, ProjectionOutcome], output_path: Path, name: str = "") -> Path:
    """Pension stack per scenario side by side; scenarios with a domain error are skipped."""
    valid = {k: v for k, v in outcomes.items() if not isinstance(v, DomainError)}
    if not valid:
        raise ValueError("No successful projection to plot")

    fig, ax = plt.subplots(figsize=(12, 7))
    _draw_stacked_bars(ax, [r.bars[-1] for r in valid.values()], titles=list(valid.keys()))
    ax.set_ylabel("EUR / Monat")
    ax.set_title("Szenariovergleich")
    ax.legend(loc="upper left")
    ax.grid(True, axis="y", alpha=0.3)
    _format_eur_axis(ax)
    return _save(fig, output_path, "scenarios", name)
