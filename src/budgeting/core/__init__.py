"""
Core Utilities Package

Shared primitives used across the budgeting domains.

This package provides:
- Currency handling with integer arithmetic for precision
- Day-aligned date ranges for search filters
- Configuration management for environment-specific settings
"""

from .config import (
    Config,
    DateOrder,
    Environment,
    SearchConfig,
    get_config,
    get_data_dir,
    reload_config,
)
from .currency import (
    amount_digits,
    cents_to_dollars_str,
    format_cents,
    parse_dollars_to_cents,
)
from .dates import DateRange, as_local_datetime, end_of_day, start_of_day
from .money import Money

__all__ = [
    # Configuration
    "Config",
    "DateOrder",
    "Environment",
    "SearchConfig",
    "get_config",
    "get_data_dir",
    "reload_config",
    # Currency utilities
    "amount_digits",
    "cents_to_dollars_str",
    "format_cents",
    "parse_dollars_to_cents",
    "Money",
    # Dates
    "DateRange",
    "as_local_datetime",
    "end_of_day",
    "start_of_day",
]
