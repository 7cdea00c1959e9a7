#!/usr/bin/env python3
"""
Listings EDA CLI — cleaning pipeline and exploratory reports for the Asheville export.

USAGE:
  python -m listings_eda.cli summary                        # Summary statistics + level counts
  python -m listings_eda.cli summary --csv path/to/listings.csv

  python -m listings_eda.cli corr                           # Full pricing correlation matrix
  python -m listings_eda.cli corr --set host --method spearman --top 5

  python -m listings_eda.cli plots                          # Pair plots + heatmaps (PNG)
  python -m listings_eda.cli plots --output ./figures

  python -m listings_eda.cli report                         # Workbook + all plots
  python -m listings_eda.cli record 1234567                 # One cleaned listing
"""
from __future__ import annotations

import argparse
import json
from dataclasses import asdict
from datetime import datetime
from pathlib import Path

import pandas as pd

from listings_eda.config import LISTINGS_CSV, REPORTS_FOLDER, CORRELATION_SETS, DEFAULT_CORRELATION_SET
from listings_eda.data.store import ListingStore
from listings_eda.analytics.common import sanitize_for_json
from listings_eda.analytics.correlation import CORRELATION_METHODS, correlation_set, top_correlations
from listings_eda.analytics.summary import summarize, level_counts, high_cardinality
from listings_eda.analytics.distribution import outlier_table


def _banner(title: str) -> None:
    print("\n" + "=" * 70)
    print(f"  LISTINGS EDA — {title}")
    print("=" * 70)


def _print_frame(df: pd.DataFrame, **kwargs) -> None:
    with pd.option_context("display.max_rows", None, "display.max_columns", None, "display.width", 200):
        print(df.to_string(**kwargs))


def cmd_summary(args):
    """Print summary statistics for the cleaned table."""
    _banner("SUMMARY STATISTICS")
    store = ListingStore().load(args.csv)
    df = store.df

    print(f"\n  Snapshot: {store.date_range()}  |  {store.row_count():,} listings\n")
    _print_frame(summarize(df))

    print("\nLEVELS\n")
    _print_frame(level_counts(df), index=False)

    print("\nOUTLIERS (Tukey fences)\n")
    _print_frame(outlier_table(df), index=False)

    wide = high_cardinality(df)
    if not wide.empty:
        print("\nHIGH-CARDINALITY COLUMNS\n")
        _print_frame(wide, index=False)
    print()


def cmd_corr(args):
    """Print one correlation matrix and its strongest pairs."""
    _banner("CORRELATIONS")
    store = ListingStore().load(args.csv)
    matrix, n = correlation_set(store.df, args.set, args.method)

    print(f"\n  Set: {args.set}  |  Method: {args.method}  |  {n:,} complete rows\n")
    _print_frame(matrix.round(3))
    print(f"\nTOP {args.top} PAIRS\n")
    _print_frame(top_correlations(matrix, args.top).round(3), index=False)
    print()


def cmd_plots(args):
    """Write pair plots and correlation heatmaps."""
    from listings_eda.reports.plots import write_all_plots

    _banner("PLOTS")
    store = ListingStore().load(args.csv)
    output = Path(args.output) if args.output else REPORTS_FOLDER / "plots"
    print("\n  Writing plots...\n")
    written = write_all_plots(store.df, output, args.method)
    print(f"\n  {len(written)} plot(s) saved to: {output}\n")


def cmd_report(args):
    """Generate the analysis workbook plus every plot."""
    from listings_eda.reports.eda_report import generate_excel
    from listings_eda.reports.plots import write_all_plots

    _banner("EXPLORATORY REPORT")
    print(f"  Started: {datetime.now():%Y-%m-%d %H:%M:%S}")
    store = ListingStore().load(args.csv)

    if args.output:
        output_folder = Path(args.output)
    else:
        output_folder = REPORTS_FOLDER / datetime.now().strftime("%Y%m%d_%H%M%S")
    output_folder.mkdir(parents=True, exist_ok=True)

    print(f"\n  Snapshot: {store.date_range()}")
    print("  Generating reports...\n")

    try:
        generate_excel(store, output_folder / "Listings_EDA.xlsx", args.method, args.top)
        print("   Listings_EDA.xlsx")
    except Exception as e:
        print(f"  WARNING: workbook failed: {e}")

    write_all_plots(store.df, output_folder / "plots", args.method)

    print(f"\n  Reports saved to: {output_folder}")
    print("=" * 70 + "\n")


def cmd_record(args):
    """Print one cleaned listing as JSON."""
    store = ListingStore().load(args.csv)
    record = store.get_record(args.id)
    if record is None:
        print(f"  Listing not found: '{args.id}'")
        return 1
    print(json.dumps(sanitize_for_json(asdict(record)), indent=2, default=str))
    return 0


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Listings EDA — Asheville Airbnb listings cleaning and exploratory analysis",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    def _add_csv(p):
        p.add_argument("--csv", default=str(LISTINGS_CSV), help=f"Listings export (default {LISTINGS_CSV})")

    def _add_method(p):
        p.add_argument("--method", choices=list(CORRELATION_METHODS), default="pearson", help="Correlation method")

    # summary subcommand
    summary_parser = subparsers.add_parser("summary", help="Print summary statistics")
    _add_csv(summary_parser)
    summary_parser.set_defaults(func=cmd_summary)

    # corr subcommand
    corr_parser = subparsers.add_parser("corr", help="Print a correlation matrix")
    _add_csv(corr_parser)
    _add_method(corr_parser)
    corr_parser.add_argument("--set", choices=list(CORRELATION_SETS), default=DEFAULT_CORRELATION_SET,
                             help=f"Column subset (default {DEFAULT_CORRELATION_SET})")
    corr_parser.add_argument("--top", type=int, default=10, help="Strongest pairs to list")
    corr_parser.set_defaults(func=cmd_corr)

    # plots subcommand
    plots_parser = subparsers.add_parser("plots", help="Write pair plots and heatmaps")
    _add_csv(plots_parser)
    _add_method(plots_parser)
    plots_parser.add_argument("--output", help="Output directory (default <data>/reports/plots)")
    plots_parser.set_defaults(func=cmd_plots)

    # report subcommand
    report_parser = subparsers.add_parser("report", help="Generate workbook + plots")
    _add_csv(report_parser)
    _add_method(report_parser)
    report_parser.add_argument("--top", type=int, default=10, help="Strongest pairs per correlation set")
    report_parser.add_argument("--output", help="Output directory (default <data>/reports/<timestamp>)")
    report_parser.set_defaults(func=cmd_report)

    # record subcommand
    record_parser = subparsers.add_parser("record", help="Print one cleaned listing")
    record_parser.add_argument("id", help="Listing id")
    _add_csv(record_parser)
    record_parser.set_defaults(func=cmd_record)

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0

    return args.func(args) or 0


if __name__ == "__main__":
    raise SystemExit(main())
