"""
Pairwise-relationship plots and correlation heatmaps (PNG, for human review).
"""
from __future__ import annotations

from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

from listings_eda.config import PAIRPLOT_SETS, PAIRPLOT_HUE, CORRELATION_SETS
from listings_eda.analytics.correlation import correlation_matrix
from listings_eda.data.schemas import require_columns

sns.set_style("whitegrid")


def pair_plot(
    df: pd.DataFrame,
    columns: list[str],
    output_path: str | Path,
    hue: str | None = None,
    title: str | None = None,
) -> Path:
    """Histograms on the diagonal, scatter plots elsewhere."""
    require_columns(df, columns + ([hue] if hue else []))
    data = df[columns].astype(float)
    if hue:
        data[hue] = df[hue].astype(object)

    grid = sns.pairplot(
        data,
        vars=columns,
        hue=hue,
        diag_kind="hist",
        corner=True,
        plot_kws={"alpha": 0.4, "s": 12},
    )
    if title:
        grid.figure.suptitle(title, fontsize=14, fontweight="bold", y=1.02)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    try:
        grid.savefig(output_path, dpi=150, bbox_inches="tight")
    finally:
        plt.close(grid.figure)
    return output_path


def correlation_heatmap(
    matrix: pd.DataFrame,
    output_path: str | Path,
    title: str | None = None,
) -> Path:
    """Annotated heatmap of a correlation matrix."""
    size = max(6, len(matrix.columns))
    fig, ax = plt.subplots(figsize=(size, size * 0.85))
    sns.heatmap(
        matrix, annot=True, fmt=".2f", cmap="coolwarm",
        vmin=-1, vmax=1, center=0, square=True, linewidths=0.5,
        cbar_kws={"shrink": 0.8}, ax=ax,
    )
    if title:
        ax.set_title(title, fontsize=14, fontweight="bold")
    fig.tight_layout()

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    try:
        fig.savefig(output_path, dpi=150, bbox_inches="tight")
    finally:
        plt.close(fig)
    return output_path


def write_all_plots(df: pd.DataFrame, output_dir: str | Path, method: str = "pearson") -> list[Path]:
    """Write every configured pair plot and correlation heatmap.

    A failing plot prints a warning and the remaining plots are still written.
    """
    output_dir = Path(output_dir)
    written: list[Path] = []

    for name, columns in PAIRPLOT_SETS.items():
        try:
            path = pair_plot(
                df, columns, output_dir / f"pairs_{name}.png",
                hue=PAIRPLOT_HUE, title=f"Pairwise relationships: {name}",
            )
            written.append(path)
            print(f"   {path.name}")
        except Exception as e:
            print(f"  WARNING: pair plot '{name}' failed: {e}")

    for name, columns in CORRELATION_SETS.items():
        try:
            matrix, n = correlation_matrix(df, columns, method)
            path = correlation_heatmap(
                matrix, output_dir / f"corr_{name}.png",
                title=f"{name.title()} correlations ({method}, n={n:,} complete rows)",
            )
            written.append(path)
            print(f"   {path.name}")
        except Exception as e:
            print(f"  WARNING: heatmap '{name}' failed: {e}")

    return written
