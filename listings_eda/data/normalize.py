"""
Field normalization: raw string encodings → typed columns.

Every conversion is per-value; a malformed cell becomes null instead of
failing the run.
"""
from __future__ import annotations

import numpy as np
import pandas as pd

from listings_eda.config import (
    DATE_COLS, DATE_FORMAT, PERCENT_COLS, CURRENCY_COLS, BOOLEAN_COLS, TRUTHY_MARKER,
    INTEGER_COLS, FLOAT_COLS, CATEGORICAL_COLS,
)


# ---------------------------------------------------------------------------
# Series parsers
# ---------------------------------------------------------------------------

def parse_dates(s: pd.Series, fmt: str = DATE_FORMAT) -> pd.Series:
    """Parse date strings; unparsable values become NaT."""
    return pd.to_datetime(s, format=fmt, errors="coerce")


def parse_percent(s: pd.Series) -> pd.Series:
    """'87%' → 87.0. Nulls, malformed values and values outside [0, 100] → NaN."""
    stripped = s.astype("string").str.strip().str.replace(r"%$", "", regex=True)
    values = pd.to_numeric(stripped, errors="coerce").astype(float)
    return values.where((values >= 0) & (values <= 100))


def parse_currency(s: pd.Series) -> pd.Series:
    """'$1,200.00' → 1200.0. One leading '$' is stripped; ',' separators are tolerated."""
    cleaned = (
        s.astype("string")
        .str.strip()
        .str.replace(r"^\$", "", regex=True)
        .str.replace(",", "", regex=False)
    )
    return pd.to_numeric(cleaned, errors="coerce").astype(float)


def parse_flag(s: pd.Series, truthy: str = TRUTHY_MARKER) -> pd.Series:
    """'t' → True, any other value → False, null stays null."""
    return (s.astype("string") == truthy).astype("boolean")


def parse_integer(s: pd.Series) -> pd.Series:
    """Coerce to nullable Int64; non-integral or malformed values → <NA>."""
    values = pd.to_numeric(s, errors="coerce").astype(float)
    values = values.where(np.isfinite(values) & (values % 1 == 0))
    return values.astype("Int64")


def parse_float(s: pd.Series) -> pd.Series:
    return pd.to_numeric(s, errors="coerce").astype(float)


def to_category(s: pd.Series, levels: list, closed: bool = True) -> pd.Series:
    """Cast to a categorical with explicit levels.

    closed: values outside `levels` become null.
    open: unseen values are appended (sorted) after the known levels.
    """
    name = s.name
    observed = s.dropna()
    unseen = sorted({v for v in observed.unique() if v not in levels}, key=str)
    if unseen:
        if closed:
            dropped = int(observed.isin(unseen).sum())
            print(f"  WARNING: {name}: {dropped:,} value(s) outside known levels set to null: {unseen}")
            s = s.where(s.isin(levels) | s.isna(), None)
        else:
            print(f"  WARNING: {name}: new level(s) {unseen} appended")
            levels = list(levels) + unseen
    return pd.Series(pd.Categorical(s, categories=levels), index=s.index, name=name)


# ---------------------------------------------------------------------------
# Stage
# ---------------------------------------------------------------------------

def normalize_fields(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy of the projected table with every source column typed."""
    df = df.copy()

    for col in DATE_COLS:
        df[col] = parse_dates(df[col])
    for col in PERCENT_COLS:
        df[col] = parse_percent(df[col])
    for col in CURRENCY_COLS:
        df[col] = parse_currency(df[col])
    for col in BOOLEAN_COLS:
        df[col] = parse_flag(df[col])
    for col in INTEGER_COLS:
        df[col] = parse_integer(df[col])
    for col in FLOAT_COLS:
        df[col] = parse_float(df[col])

    # Booleans must be converted before their categorical cast
    for col, (levels, closed) in CATEGORICAL_COLS.items():
        values = df[col]
        if values.dtype.name == "boolean":
            values = values.astype(object).where(values.notna(), None)
        df[col] = to_category(values, levels, closed)

    for col in ["property_type", "bathrooms_text", "amenities"]:
        df[col] = df[col].astype("string")

    return df
