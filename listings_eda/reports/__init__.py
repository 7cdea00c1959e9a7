"""Human-facing report artifacts: workbook and plots."""
