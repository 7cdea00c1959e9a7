"""
Derived-field synthesis on the normalized listings table.
"""
from __future__ import annotations

import numpy as np
import pandas as pd

from listings_eda.config import (
    DAYS_PER_YEAR, HALF_BATH_LITERAL, HALF_BATH_VALUE, CBD_ZIPCODE,
    REVIEW_GOOD_THRESHOLD, REVIEW_BAD_CUTOFF_POSITION, REVIEW_LEVELS,
)
from listings_eda.analytics.common import five_number
from listings_eda.data.schemas import ReviewCategory


# ---------------------------------------------------------------------------
# Column derivations
# ---------------------------------------------------------------------------

def years_between(start: pd.Series, end: pd.Series) -> pd.Series:
    """(end - start) in fractional years. Negative when start is after end."""
    return (end - start).dt.days / DAYS_PER_YEAR


def parse_bathrooms(s: pd.Series) -> pd.Series:
    """'Half-bath' → 0.5, '1.5 shared baths' → 1.5, no leading number → NaN."""
    text = s.astype("string").str.strip()
    half = text == HALF_BATH_LITERAL
    leading = text.str.extract(r"^(\d+(?:\.\d+)?)", expand=False)
    values = pd.to_numeric(leading, errors="coerce").astype(float)
    return values.mask(half.fillna(False).astype(bool), HALF_BATH_VALUE)


def count_amenities(s: pd.Series) -> pd.Series:
    """Number of ',' separators + 1. Missing text stays missing."""
    return (s.astype("string").str.count(",") + 1).astype("Int64")


def cbd_flag(zipcode: pd.Series, cbd: str = CBD_ZIPCODE) -> pd.Series:
    """True iff zipcode equals the central business district zipcode."""
    return (zipcode.astype(object) == cbd).astype(bool)


def review_cutoff(ratings: pd.Series) -> float:
    """Lower cutoff for 'bad' reviews, taken from the five-number summary."""
    return float(five_number(ratings)[REVIEW_BAD_CUTOFF_POSITION])


def classify_reviews(
    ratings: pd.Series,
    good_threshold: float = REVIEW_GOOD_THRESHOLD,
    bad_cutoff: float | None = None,
) -> pd.Series:
    """Classify ratings as good / bad / missing, checked in that priority.

    missing: rating is null
    good:    rating > good_threshold
    bad:     rating <= bad_cutoff (default: review_cutoff of the sample)
    Ratings between bad_cutoff and good_threshold are left unclassified.
    """
    if bad_cutoff is None:
        bad_cutoff = review_cutoff(ratings)

    result = pd.Series(None, index=ratings.index, dtype=object)
    unset = result.isna()

    missing = ratings.isna()
    result[missing] = ReviewCategory.MISSING.value
    unset &= ~missing

    good = unset & (ratings > good_threshold)
    result[good] = ReviewCategory.GOOD.value
    unset &= ~good

    bad = unset & (ratings <= bad_cutoff)
    result[bad] = ReviewCategory.BAD.value

    return pd.Series(pd.Categorical(result, categories=REVIEW_LEVELS), index=ratings.index)


# ---------------------------------------------------------------------------
# Stage
# ---------------------------------------------------------------------------

def derive_fields(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy of the normalized table with derived columns appended."""
    df = df.copy()
    df["years_hosting"] = years_between(df["host_since"], df["last_scraped"])
    df["bathrooms"] = parse_bathrooms(df["bathrooms_text"])
    df["amenities_count"] = count_amenities(df["amenities"])
    df["is_cbd"] = cbd_flag(df["zipcode"])
    df["review_scores_factor"] = classify_reviews(df["review_scores_rating"])

    cutoff = review_cutoff(df["review_scores_rating"])
    if not np.isnan(cutoff):
        print(f"  Review cutoff: bad <= {cutoff:.2f}, good > {REVIEW_GOOD_THRESHOLD}")
    return df
