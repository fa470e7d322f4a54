#!/usr/bin/env python3
"""Generate charts of the default experiment for the README.

Produces 2 PNGs in docs/images/:
  1. exponential_histogram.png — observed unit-bin counts against the
     expected exponential counts
  2. class_frequencies.png     — empirical class probabilities of the
     default class draw

Runs the default experiment config, so the charts are reproducible.
"""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from mtsample import default_experiment_config, run_experiments

BLUE = "#4363D8"
RED = "#E6194B"
GRID_COLOR = "#E5E5E5"

FIGSIZE = (10, 5)
DPI = 150

OUT_DIR = Path(__file__).resolve().parent.parent / "docs" / "images"


def _style_ax(ax: plt.Axes) -> None:
    """Apply common axis styling."""
    ax.set_facecolor("white")
    ax.grid(True, axis="y", color=GRID_COLOR, alpha=0.30, linewidth=0.8)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.spines["left"].set_color("#CCCCCC")
    ax.spines["bottom"].set_color("#CCCCCC")
    ax.tick_params(colors="#555555")


# ---------------------------------------------------------------------------
# Chart 1: Exponential histogram
# ---------------------------------------------------------------------------
def generate_exponential_histogram() -> None:
    """Observed histogram with the expected count per unit bin overlaid."""
    config = default_experiment_config()
    result = run_experiments(config)
    expo = config.exponential
    counts = result.exponential_histogram
    n_bins = len(counts)

    # P(k <= X < k+1) for the unit bins, remaining tail mass for the last one
    edges = np.arange(n_bins, dtype=float)
    cdf = 1.0 - np.exp(-edges / expo.mean)
    expected = np.append(np.diff(cdf), 1.0 - cdf[-1]) * expo.n_draws

    fig, ax = plt.subplots(figsize=FIGSIZE, dpi=DPI)
    fig.patch.set_facecolor("white")
    ax.bar(edges, counts, width=0.9, color=BLUE, alpha=0.7, label="Observed")
    ax.plot(edges, expected, color=RED, linewidth=2, marker="o", markersize=3, label="Expected")

    ax.set_xlabel("Integer part of deviate (last bin: overflow)", fontsize=12, color="#555555")
    ax.set_ylabel("Count", fontsize=12, color="#555555")
    ax.set_title(
        f"Exponential Deviates, mean {expo.mean:g}, {expo.n_draws:,} draws",
        fontsize=14,
        fontweight="bold",
        color="#333333",
    )
    ax.legend(loc="upper right", framealpha=0.9, fontsize=10)
    _style_ax(ax)

    fig.tight_layout()
    fig.savefig(OUT_DIR / "exponential_histogram.png", dpi=DPI, bbox_inches="tight")
    plt.close(fig)
    print(f"  Saved {OUT_DIR / 'exponential_histogram.png'}")


# ---------------------------------------------------------------------------
# Chart 2: Class frequencies
# ---------------------------------------------------------------------------
def generate_class_frequencies() -> None:
    """Empirical class probabilities next to the configured band widths."""
    config = default_experiment_config()
    result = run_experiments(config)
    table = result.class_table

    bounds = [0.0, *config.classes.thresholds, 1.0]
    theoretical = np.diff(bounds)
    x = np.arange(len(table.labels))

    fig, ax = plt.subplots(figsize=FIGSIZE, dpi=DPI)
    fig.patch.set_facecolor("white")
    ax.bar(x - 0.2, table.probabilities, width=0.4, color=BLUE, label="Observed")
    ax.bar(x + 0.2, theoretical, width=0.4, color=RED, alpha=0.6, label="Band width")
    ax.set_xticks(x, table.labels)

    ax.set_xlabel("Class", fontsize=12, color="#555555")
    ax.set_ylabel("Probability", fontsize=12, color="#555555")
    ax.set_title(
        f"Class Draws ({config.classes.n_draws:,} draws)",
        fontsize=14,
        fontweight="bold",
        color="#333333",
    )
    ax.legend(loc="upper right", framealpha=0.9, fontsize=10)
    _style_ax(ax)

    fig.tight_layout()
    fig.savefig(OUT_DIR / "class_frequencies.png", dpi=DPI, bbox_inches="tight")
    plt.close(fig)
    print(f"  Saved {OUT_DIR / 'class_frequencies.png'}")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    import matplotlib

    matplotlib.use("Agg")

    OUT_DIR.mkdir(parents=True, exist_ok=True)
    print("Generating README charts...")
    generate_exponential_histogram()
    generate_class_frequencies()
    print("Done.")
