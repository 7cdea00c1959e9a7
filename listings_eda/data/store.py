"""
ListingStore — cleaned listings table held in memory for reporting.

Loaded once, read by every report. Nothing is written back.
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pandas as pd

from listings_eda.config import LISTINGS_CSV
from listings_eda.data.loader import load_listings
from listings_eda.data.pipeline import run_pipeline
from listings_eda.data.schemas import ListingRecord, iter_records


class ListingStore:
    """In-memory cleaned listings with read-only accessors."""

    def __init__(self) -> None:
        self.df: pd.DataFrame = pd.DataFrame()
        self.source: Path | None = None
        self._loaded = False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, path: str | Path = LISTINGS_CSV) -> "ListingStore":
        """Load the export and run the cleaning pipeline."""
        print("Loading listings...")
        self.source = Path(path)
        raw = load_listings(self.source)
        self.df = run_pipeline(raw)
        print(f"  Cleaned {len(self.df):,} listings, {len(self.df.columns)} columns")
        self._loaded = True
        return self

    @classmethod
    def from_frame(cls, raw: pd.DataFrame) -> "ListingStore":
        """Build a store from an already-read export (no file access)."""
        store = cls()
        store.df = run_pipeline(raw)
        store._loaded = True
        return store

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_record(self, listing_id: str) -> ListingRecord | None:
        """The cleaned listing with this id, or None."""
        match = self.df[self.df["id"] == str(listing_id)]
        if match.empty:
            return None
        return ListingRecord.from_row(match.iloc[0])

    def records(self) -> Iterator[ListingRecord]:
        return iter_records(self.df)

    # ------------------------------------------------------------------
    # Metadata queries
    # ------------------------------------------------------------------

    def row_count(self) -> int:
        return len(self.df)

    def zipcodes(self) -> list[str]:
        """Zipcode levels present in the data."""
        if self.df.empty:
            return []
        return sorted(self.df["zipcode"].dropna().astype(str).unique().tolist())

    def date_range(self) -> str:
        """Snapshot date range as a human-readable string."""
        if self.df.empty:
            return "N/A"
        dates = self.df["last_scraped"].dropna()
        if dates.empty:
            return "N/A"
        return f"{dates.min():%Y-%m-%d} to {dates.max():%Y-%m-%d}"
