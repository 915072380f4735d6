"""Reporting helpers for approximation runs."""

from .table import IterationTable, format_row
from .graph import render_iterates

__all__ = [
    "IterationTable",
    "format_row",
    "render_iterates",
]
