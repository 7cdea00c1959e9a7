"""
Listings export loading and column projection.
"""
from __future__ import annotations

from pathlib import Path

import pandas as pd

from listings_eda.config import LISTINGS_CSV, SOURCE_COLUMNS, COLUMN_MAP, STRING_SOURCE_COLUMNS
from listings_eda.data.schemas import require_columns


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def load_listings(filepath: str | Path = LISTINGS_CSV) -> pd.DataFrame:
    """Read the whole listings export into memory.

    Raises FileNotFoundError if the export is absent; pandas parser errors
    propagate for unparsable files.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Listings export not found: {filepath}")

    dtype = {c: str for c in STRING_SOURCE_COLUMNS}
    df = pd.read_csv(filepath, dtype=dtype, low_memory=False)
    print(f"  Loaded {len(df):,} rows x {len(df.columns)} columns from {filepath.name}")
    return df


# ---------------------------------------------------------------------------
# Column selection
# ---------------------------------------------------------------------------

def select_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Project the fixed source columns and rename neighbourhood → zipcode."""
    require_columns(df, SOURCE_COLUMNS)
    return df[SOURCE_COLUMNS].rename(columns=COLUMN_MAP).copy()
