"""
Descriptive statistics — per-column summary, categorical level counts, cardinality.
"""
from __future__ import annotations

import pandas as pd

from listings_eda.config import SUMMARY_EXCLUDED_COLS, HIGH_CARDINALITY_THRESHOLD
from listings_eda.analytics.common import pct_of_total


SUMMARY_FIELDS = [
    "column", "dtype", "count", "missing", "missing_pct",
    "mean", "std", "min", "25%", "50%", "75%", "max",
    "unique", "top", "top_count",
]

_NUMERIC_STATS = ["mean", "std", "min", "25%", "50%", "75%", "max"]


def _is_numeric(s: pd.Series) -> bool:
    return pd.api.types.is_numeric_dtype(s.dtype) and not pd.api.types.is_bool_dtype(s.dtype)


def summarize_column(s: pd.Series) -> dict:
    """Summary statistics for a single column."""
    n = len(s)
    missing = int(s.isna().sum())
    row = {field: None for field in SUMMARY_FIELDS}
    row.update({
        "column": s.name,
        "dtype": str(s.dtype),
        "count": n - missing,
        "missing": missing,
        "missing_pct": round(pct_of_total(missing, n), 1),
    })

    if _is_numeric(s):
        desc = s.astype(float).describe()
        for stat in _NUMERIC_STATS:
            row[stat] = float(desc[stat])
    elif pd.api.types.is_datetime64_any_dtype(s.dtype):
        row["min"] = s.min()
        row["50%"] = s.median()
        row["max"] = s.max()
    else:
        counts = s.value_counts(dropna=True)
        counts = counts[counts > 0]
        row["unique"] = int(len(counts))
        if len(counts):
            row["top"] = counts.index[0]
            row["top_count"] = int(counts.iloc[0])
    return row


def summarize(df: pd.DataFrame, exclude: list[str] | None = None) -> pd.DataFrame:
    """One summary row per column, skipping identifier and raw text columns."""
    if exclude is None:
        exclude = SUMMARY_EXCLUDED_COLS
    rows = [summarize_column(df[col]) for col in df.columns if col not in exclude]
    return pd.DataFrame(rows, columns=SUMMARY_FIELDS).set_index("column")


def level_counts(df: pd.DataFrame) -> pd.DataFrame:
    """Counts per level for every categorical and boolean column, plus missing."""
    rows = []
    for col in df.columns:
        s = df[col]
        if not (isinstance(s.dtype, pd.CategoricalDtype) or pd.api.types.is_bool_dtype(s.dtype)):
            continue
        n = len(s)
        counts = s.value_counts(dropna=True, sort=False)
        for level, count in counts.items():
            rows.append({
                "column": col,
                "level": str(level),
                "count": int(count),
                "pct": round(pct_of_total(count, n), 1),
            })
        missing = int(s.isna().sum())
        if missing:
            rows.append({
                "column": col,
                "level": "(missing)",
                "count": missing,
                "pct": round(pct_of_total(missing, n), 1),
            })
    return pd.DataFrame(rows, columns=["column", "level", "count", "pct"])


def high_cardinality(
    df: pd.DataFrame,
    threshold: int = HIGH_CARDINALITY_THRESHOLD,
    exclude: list[str] | None = None,
) -> pd.DataFrame:
    """Text and categorical columns with more than `threshold` distinct values."""
    if exclude is None:
        exclude = SUMMARY_EXCLUDED_COLS
    rows = []
    for col in df.columns:
        if col in exclude:
            continue
        s = df[col]
        if _is_numeric(s) or pd.api.types.is_datetime64_any_dtype(s.dtype):
            continue
        levels = int(s.nunique(dropna=True))
        if levels > threshold:
            rows.append({"column": col, "levels": levels})
    return pd.DataFrame(rows, columns=["column", "levels"])
