"""
Listing record schema and source-column checks.
"""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, fields
from enum import Enum
from typing import Iterator, Optional

import pandas as pd


class SchemaError(ValueError):
    """Raised when the export is missing columns the pipeline depends on."""


class ReviewCategory(str, Enum):
    GOOD = "good"
    BAD = "bad"
    MISSING = "missing"


@dataclass(frozen=True)
class ListingRecord:
    """One cleaned listing, field order matching the cleaned table."""
    id: str
    last_scraped: Optional[dt.date]
    host_since: Optional[dt.date]
    host_response_time: Optional[str]
    host_response_rate: Optional[float]      # 0-100
    host_is_superhost: Optional[bool]
    host_listings_count: Optional[int]
    zipcode: Optional[str]
    property_type: Optional[str]
    room_type: Optional[str]
    accommodates: Optional[int]
    bathrooms_text: Optional[str]
    bedrooms: Optional[int]
    beds: Optional[int]
    amenities: Optional[str]
    price: Optional[float]
    minimum_nights: Optional[int]
    maximum_nights: Optional[int]
    review_scores_rating: Optional[float]
    # Derived
    years_hosting: Optional[float]
    bathrooms: Optional[float]
    amenities_count: Optional[int]
    is_cbd: bool
    review_scores_factor: Optional[ReviewCategory]

    @classmethod
    def columns(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_row(cls, row: pd.Series) -> "ListingRecord":
        """Build a record from one row of the cleaned table."""
        values = {}
        for name in cls.columns():
            values[name] = _to_native(row[name])
        if values["review_scores_factor"] is not None:
            values["review_scores_factor"] = ReviewCategory(values["review_scores_factor"])
        values["is_cbd"] = bool(values["is_cbd"])
        return cls(**values)


def _to_native(value):
    """Convert a pandas/numpy cell to a plain Python value (None for missing)."""
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return None
    if isinstance(value, pd.Timestamp):
        return value.date()
    if hasattr(value, "item"):
        return value.item()
    return value


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------

def require_columns(df: pd.DataFrame, columns: list[str]) -> None:
    """Raise SchemaError naming every column of `columns` absent from df."""
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise SchemaError(
            f"Listings export is missing {len(missing)} expected column(s): {', '.join(missing)}"
        )


def check_cleaned(df: pd.DataFrame) -> None:
    """Raise SchemaError unless df's columns are exactly the ListingRecord fields, in order."""
    expected = ListingRecord.columns()
    if list(df.columns) != expected:
        require_columns(df, expected)
        extra = [c for c in df.columns if c not in expected]
        if extra:
            raise SchemaError(f"Unexpected column(s) in cleaned table: {', '.join(extra)}")
        raise SchemaError("Cleaned table columns are out of order")


def iter_records(df: pd.DataFrame) -> Iterator[ListingRecord]:
    """Yield a ListingRecord for every row of the cleaned table."""
    check_cleaned(df)
    for _, row in df.iterrows():
        yield ListingRecord.from_row(row)
