"""Functional core - pure path and selection logic with no I/O."""

from .paths import (
    EntryName,
    entry_filename,
    format_entry_date,
    is_valid_month,
    is_valid_year,
    month_dir,
    render_entry,
    sanitize_title,
)
from .selector import Selector, selector_from_options, week_dates

__all__ = [
    # Paths
    "EntryName",
    "entry_filename",
    "format_entry_date",
    "is_valid_month",
    "is_valid_year",
    "month_dir",
    "render_entry",
    "sanitize_title",
    # Selection
    "Selector",
    "selector_from_options",
    "week_dates",
]
