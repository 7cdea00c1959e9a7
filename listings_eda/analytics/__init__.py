"""Descriptive statistics, correlations, and distribution checks."""
