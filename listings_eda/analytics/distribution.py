"""
Distribution checks for heavy-tailed columns (Tukey fences).
"""
from __future__ import annotations

import pandas as pd

from listings_eda.config import OUTLIER_COLS


def iqr_outliers(s: pd.Series, k: float = 1.5) -> dict:
    """Tukey fences for a numeric column and the counts falling outside them."""
    values = s.astype(float).dropna()
    if values.empty:
        return {
            "column": s.name, "count": 0, "q1": None, "q3": None,
            "lower_fence": None, "upper_fence": None,
            "below": 0, "above": 0, "max": None,
        }
    q1, q3 = values.quantile(0.25), values.quantile(0.75)
    iqr = q3 - q1
    lower, upper = q1 - k * iqr, q3 + k * iqr
    return {
        "column": s.name,
        "count": int(len(values)),
        "q1": float(q1),
        "q3": float(q3),
        "lower_fence": float(lower),
        "upper_fence": float(upper),
        "below": int((values < lower).sum()),
        "above": int((values > upper).sum()),
        "max": float(values.max()),
    }


def outlier_table(df: pd.DataFrame, columns: list[str] | None = None) -> pd.DataFrame:
    if columns is None:
        columns = OUTLIER_COLS
    return pd.DataFrame([iqr_outliers(df[c]) for c in columns])
