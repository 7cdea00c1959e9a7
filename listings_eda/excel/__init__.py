"""Styled workbook output for the exploratory report."""
from .formatters import format_data_cell, correlation_highlight
from .writer import ExcelWriter
