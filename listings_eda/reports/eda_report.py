"""
Exploratory Analysis Report — summary statistics, levels, correlations, outliers.
"""
from __future__ import annotations

from pathlib import Path

import pandas as pd

from listings_eda.config import CORRELATION_SETS, REVIEW_GOOD_THRESHOLD
from listings_eda.data.store import ListingStore
from listings_eda.data.derive import review_cutoff
from listings_eda.analytics.summary import summarize, level_counts, high_cardinality
from listings_eda.analytics.correlation import correlation_matrix, top_correlations
from listings_eda.analytics.distribution import outlier_table
from listings_eda.excel.formatters import correlation_highlight
from listings_eda.excel.writer import ExcelWriter


SUMMARY_COLS = [
    ("column", "text", "Column"),
    ("dtype", "text", "Type"),
    ("count", "number", "Count"),
    ("missing", "number", "Missing"),
    ("missing_pct", "percent", "% Missing"),
    ("mean", "decimal", "Mean"),
    ("std", "decimal", "Std Dev"),
    ("min", "value", "Min"),
    ("25%", "decimal", "25%"),
    ("50%", "value", "Median"),
    ("75%", "decimal", "75%"),
    ("max", "value", "Max"),
    ("unique", "number", "Levels"),
    ("top", "text", "Most Common"),
    ("top_count", "number", "Most Common Count"),
]

LEVEL_COLS = [
    ("column", "text", "Column"),
    ("level", "text", "Level"),
    ("count", "number", "Count"),
    ("pct", "percent", "% of Listings"),
]

TOP_PAIR_COLS = [
    ("set", "text", "Set"),
    ("variable_1", "text", "Variable 1"),
    ("variable_2", "text", "Variable 2"),
    ("correlation", "corr", "r"),
]

OUTLIER_COLS = [
    ("column", "text", "Column"),
    ("count", "number", "Non-missing"),
    ("q1", "decimal", "Q1"),
    ("q3", "decimal", "Q3"),
    ("lower_fence", "decimal", "Lower Fence"),
    ("upper_fence", "decimal", "Upper Fence"),
    ("below", "number", "Below"),
    ("above", "number", "Above"),
    ("max", "decimal", "Max"),
]

CARDINALITY_COLS = [
    ("column", "text", "Column"),
    ("levels", "number", "Distinct Levels"),
]

STRONG_CORRELATION = 0.5

CORRELATION_LEGEND = [
    ("positive", f"r >= {STRONG_CORRELATION}"),
    ("positive_weak", f"{STRONG_CORRELATION / 2} <= r < {STRONG_CORRELATION}"),
    ("negative_weak", f"-{STRONG_CORRELATION} < r <= -{STRONG_CORRELATION / 2}"),
    ("negative", f"r <= -{STRONG_CORRELATION}"),
]


def _median(df: pd.DataFrame, col: str):
    values = df[col].dropna()
    return float(values.astype(float).median()) if len(values) else None


def build_report(store: ListingStore, method: str = "pearson", top_n: int = 10) -> dict:
    """Collect every report table as DataFrames."""
    df = store.df
    correlations = {}
    pairs = []
    for name, columns in CORRELATION_SETS.items():
        matrix, n = correlation_matrix(df, columns, method)
        correlations[name] = {"matrix": matrix, "complete_rows": n}
        top = top_correlations(matrix, top_n)
        top.insert(0, "set", name)
        pairs.append(top)

    return {
        "source": str(store.source) if store.source else None,
        "date_range": store.date_range(),
        "listings": store.row_count(),
        "zipcodes": store.zipcodes(),
        "median_price": _median(df, "price"),
        "median_rating": _median(df, "review_scores_rating"),
        "review_cutoff": review_cutoff(df["review_scores_rating"]),
        "method": method,
        "summary": summarize(df).reset_index(),
        "levels": level_counts(df),
        "high_cardinality": high_cardinality(df),
        "outliers": outlier_table(df),
        "correlations": correlations,
        "top_pairs": pd.concat(pairs, ignore_index=True),
    }


def generate_excel(
    store: ListingStore,
    output_path: str | Path,
    method: str = "pearson",
    top_n: int = 10,
) -> Path:
    data = build_report(store, method, top_n)
    ew = ExcelWriter()

    # Overview
    ws = ew.add_sheet("Overview")
    ew.write_title(ws, "ASHEVILLE LISTINGS",
                   f"Exploratory Analysis  |  Snapshot {data['date_range']}  |  Generated {pd.Timestamp.now():%B %d, %Y}")

    row = ew.write_section(ws, 5, "DATASET")
    row = ew.write_kpi_row(ws, row, [
        (data["listings"], "LISTINGS", "number"),
        (len(data["zipcodes"]), "ZIPCODES", "number"),
        (data["median_price"], "MEDIAN PRICE", "currency"),
        (data["median_rating"], "MEDIAN RATING", "decimal"),
    ])

    row = ew.write_section(ws, row, "REVIEW CATEGORIES")
    row = ew.write_note(
        ws, row, "Thresholds",
        f"good: rating > {REVIEW_GOOD_THRESHOLD}.  bad: rating <= {data['review_cutoff']:.2f} "
        "(median of the five-number summary; labelled 1st quartile in the analysis notes).  "
        "Ratings between the two cutoffs are left unclassified; missing ratings form their own level.",
    )

    # Summary statistics
    ws_s = ew.add_sheet("Summary Statistics")
    ew.write_table(ws_s, 1, SUMMARY_COLS, data["summary"])

    ws_l = ew.add_sheet("Levels")
    ew.write_table(ws_l, 1, LEVEL_COLS, data["levels"])

    # Correlations
    for name, c in data["correlations"].items():
        matrix = c["matrix"]
        ws_c = ew.add_sheet(f"Corr {name.title()}")
        r = ew.write_section(ws_c, 1, f"{name.title()} ({method}, {c['complete_rows']:,} complete rows)")
        r = ew.write_matrix(ws_c, r, matrix, strong=STRONG_CORRELATION)
        ew.write_legend(ws_c, r + 1, CORRELATION_LEGEND)

    ws_p = ew.add_sheet("Top Pairs")
    ew.write_table(
        ws_p, 1, TOP_PAIR_COLS, data["top_pairs"],
        highlight_fn=lambda _, rd, key: (
            correlation_highlight(rd["correlation"], STRONG_CORRELATION) if key == "correlation" else None
        ),
    )

    # Distributions
    ws_o = ew.add_sheet("Outliers")
    r = ew.write_table(
        ws_o, 1, OUTLIER_COLS, data["outliers"], freeze=False,
        highlight_fn=lambda _, rd, key: "flag" if key in ("below", "above") and rd.get(key) else None,
    )
    r = ew.write_section(ws_o, r + 2, "HIGH-CARDINALITY COLUMNS")
    ew.write_table(ws_o, r, CARDINALITY_COLS, data["high_cardinality"], freeze=False)

    return ew.save(output_path)
