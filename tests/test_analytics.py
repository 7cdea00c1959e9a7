import numpy as np
import pandas as pd
import pytest

from listings_eda.config import SUMMARY_EXCLUDED_COLS, CORRELATION_SETS
from listings_eda.analytics.common import five_number, safe_divide, pct_of_total, sanitize_for_json
from listings_eda.analytics.summary import summarize, level_counts, high_cardinality
from listings_eda.analytics.correlation import (
    complete_observations, correlation_matrix, correlation_set, top_correlations,
)
from listings_eda.analytics.distribution import iqr_outliers, outlier_table
from listings_eda.data.schemas import SchemaError


# ---------------------------------------------------------------------------
# common
# ---------------------------------------------------------------------------

def test_five_number_odd_and_even():
    assert five_number(pd.Series([5, 1, 3, 2, 4])).tolist() == [1, 2, 3, 4, 5]
    assert five_number(pd.Series([1, 2, 3, 4, np.nan])).tolist() == [1, 1.5, 2.5, 3.5, 4]


def test_five_number_empty():
    assert np.isnan(five_number(pd.Series([np.nan], dtype=float))).all()


def test_safe_divide_and_pct():
    assert safe_divide(1, 0) == 0.0
    assert safe_divide(1, np.nan, default=-1) == -1
    assert pct_of_total(1, 4) == 25.0


def test_sanitize_for_json():
    out = sanitize_for_json({"a": np.int64(3), "b": np.float64("nan"), "c": [np.bool_(True)]})
    assert out == {"a": 3, "b": None, "c": [True]}
    assert sanitize_for_json([pd.Timestamp("2021-10-21"), pd.NaT]) == ["2021-10-21T00:00:00", None]


# ---------------------------------------------------------------------------
# summary
# ---------------------------------------------------------------------------

def test_summarize_excludes_raw_text_and_id(cleaned):
    summary = summarize(cleaned)
    for col in SUMMARY_EXCLUDED_COLS:
        assert col not in summary.index
    assert "bathrooms" in summary.index
    assert "amenities_count" in summary.index


def test_summarize_numeric_row(cleaned):
    price = summarize(cleaned).loc["price"]
    assert price["count"] == 5
    assert price["missing"] == 0
    assert price["mean"] == pytest.approx((150 + 1200 + 150 + 95 + 310) / 5)
    assert price["50%"] == 150.0
    assert price["max"] == 1200.0


def test_summarize_missingness_and_categoricals(cleaned):
    summary = summarize(cleaned)
    rate = summary.loc["host_response_rate"]
    assert rate["missing"] == 1
    assert rate["missing_pct"] == 20.0

    room = summary.loc["room_type"]
    assert room["unique"] == 2
    assert room["top"] == "Entire home/apt"
    assert room["top_count"] == 4

    since = summary.loc["host_since"]
    assert since["min"] == pd.Timestamp("2015-10-21")
    assert since["max"] == pd.Timestamp("2021-12-01")


def test_level_counts(cleaned):
    levels = level_counts(cleaned)
    factor = levels[levels["column"] == "review_scores_factor"].set_index("level")["count"].to_dict()
    assert factor == {"good": 1, "bad": 2, "missing": 1, "(missing)": 1}

    zips = levels[levels["column"] == "zipcode"].set_index("level")["count"]
    assert zips["28801"] == 2
    assert zips["28715"] == 0  # known level, unobserved

    cbd = levels[levels["column"] == "is_cbd"].set_index("level")["count"].to_dict()
    assert cbd == {"True": 2, "False": 3}


def test_high_cardinality(cleaned):
    flagged = high_cardinality(cleaned, threshold=4)
    assert flagged["column"].tolist() == ["property_type"]
    assert flagged["levels"].tolist() == [5]
    assert high_cardinality(cleaned, threshold=10).empty


# ---------------------------------------------------------------------------
# correlation
# ---------------------------------------------------------------------------

def test_correlation_uses_complete_observations_only():
    df = pd.DataFrame({
        "a": [1.0, 2.0, 3.0, 4.0],
        "b": [2.0, 4.0, 6.0, 9.0],
        "c": [1.0, np.nan, 3.0, 4.0],
    })
    matrix, n = correlation_matrix(df, ["a", "b", "c"])
    assert n == 3
    expected = np.corrcoef([1.0, 3.0, 4.0], [2.0, 6.0, 9.0])[0, 1]
    assert matrix.loc["a", "b"] == pytest.approx(expected)
    # Pairwise-complete would use all four rows for (a, b)
    assert matrix.loc["a", "b"] != pytest.approx(np.corrcoef(df["a"], df["b"])[0, 1])


def test_correlation_on_cleaned(cleaned):
    columns = CORRELATION_SETS["pricing"]
    matrix, n = correlation_matrix(cleaned, columns)
    assert n == 4  # listing 103 lacks response rate, bedrooms and rating
    assert list(matrix.columns) == columns
    assert matrix.loc["price", "price"] == pytest.approx(1.0)
    expected = complete_observations(cleaned, columns).corr()
    pd.testing.assert_frame_equal(matrix, expected)


def test_correlation_set_and_method(cleaned):
    matrix, n = correlation_set(cleaned, "property", method="spearman")
    assert list(matrix.columns) == CORRELATION_SETS["property"]
    assert n == 4
    with pytest.raises(ValueError):
        correlation_set(cleaned, "nope")
    with pytest.raises(ValueError):
        correlation_matrix(cleaned, ["price", "beds"], method="kendall-ish")


def test_correlation_missing_column(cleaned):
    with pytest.raises(SchemaError):
        correlation_matrix(cleaned, ["price", "square_feet"])


def test_top_correlations():
    matrix = pd.DataFrame(
        [[1.0, 0.2, -0.9], [0.2, 1.0, 0.5], [-0.9, 0.5, 1.0]],
        index=["x", "y", "z"], columns=["x", "y", "z"],
    )
    top = top_correlations(matrix, 2)
    assert top[["variable_1", "variable_2"]].values.tolist() == [["x", "z"], ["y", "z"]]
    assert top["correlation"].tolist() == [-0.9, 0.5]


# ---------------------------------------------------------------------------
# distribution
# ---------------------------------------------------------------------------

def test_iqr_outliers_flags_heavy_tail():
    s = pd.Series([1, 1, 2, 2, 3, 3, 4, 250], name="host_listings_count")
    result = iqr_outliers(s)
    assert result["above"] == 1
    assert result["below"] == 0
    assert result["max"] == 250.0
    assert result["upper_fence"] == pytest.approx(3.25 + 1.5 * (3.25 - 1.75))


def test_iqr_outliers_empty():
    result = iqr_outliers(pd.Series([np.nan], name="price"))
    assert result["count"] == 0
    assert result["upper_fence"] is None


def test_outlier_table(cleaned):
    table = outlier_table(cleaned)
    assert "host_listings_count" in table["column"].tolist()
    assert table.set_index("column").loc["host_listings_count", "above"] == 1
