"""
Stage sequence: raw export → cleaned listings table.
"""
from __future__ import annotations

from typing import Callable

import pandas as pd

from listings_eda.data.loader import select_columns
from listings_eda.data.normalize import normalize_fields
from listings_eda.data.derive import derive_fields
from listings_eda.data.schemas import check_cleaned

Stage = Callable[[pd.DataFrame], pd.DataFrame]

# Order matters: derivations read columns parsed by normalize_fields
STAGES: tuple[Stage, ...] = (
    select_columns,
    normalize_fields,
    derive_fields,
)


def run_pipeline(raw: pd.DataFrame, stages: tuple[Stage, ...] = STAGES) -> pd.DataFrame:
    """Apply each stage to the previous stage's output. `raw` is left untouched."""
    df = raw
    for stage in stages:
        df = stage(df)
    check_cleaned(df)
    return df
