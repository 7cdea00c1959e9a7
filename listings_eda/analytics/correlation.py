"""
Correlation matrices over complete observations.
"""
from __future__ import annotations

import pandas as pd

from listings_eda.config import CORRELATION_SETS, DEFAULT_CORRELATION_SET
from listings_eda.data.schemas import require_columns

CORRELATION_METHODS = ("pearson", "spearman")


def complete_observations(df: pd.DataFrame, columns: list[str]) -> pd.DataFrame:
    """Rows with no missing value among `columns`, as floats."""
    require_columns(df, columns)
    return df[columns].astype(float).dropna()


def correlation_matrix(
    df: pd.DataFrame,
    columns: list[str] | None = None,
    method: str = "pearson",
) -> tuple[pd.DataFrame, int]:
    """Pairwise correlation using complete observations only.

    Returns (matrix, number of complete rows used).
    """
    if method not in CORRELATION_METHODS:
        raise ValueError(f"Unknown correlation method: {method}. Valid: {list(CORRELATION_METHODS)}")
    if columns is None:
        columns = CORRELATION_SETS[DEFAULT_CORRELATION_SET]
    complete = complete_observations(df, columns)
    return complete.corr(method=method), len(complete)


def correlation_set(df: pd.DataFrame, name: str, method: str = "pearson") -> tuple[pd.DataFrame, int]:
    """Correlation matrix for one of the named column subsets."""
    if name not in CORRELATION_SETS:
        raise ValueError(f"Unknown correlation set: {name}. Valid: {list(CORRELATION_SETS)}")
    return correlation_matrix(df, CORRELATION_SETS[name], method)


def top_correlations(matrix: pd.DataFrame, n: int = 10) -> pd.DataFrame:
    """Strongest off-diagonal pairs, ordered by absolute correlation."""
    cols = list(matrix.columns)
    pairs = pd.DataFrame(
        [
            {"variable_1": a, "variable_2": b, "correlation": float(matrix.loc[a, b])}
            for i, a in enumerate(cols)
            for b in cols[i + 1:]
        ],
        columns=["variable_1", "variable_2", "correlation"],
    )
    order = pairs["correlation"].abs().sort_values(ascending=False, kind="stable").index
    return pairs.loc[order].head(n).reset_index(drop=True)
