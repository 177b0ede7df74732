#!/usr/bin/env python3
"""
JSON Utilities Module

Pretty-printed JSON for CLI output, with serialization for the budgeting
value types (Money, dates, date ranges, enums).
"""

import json
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Any

from .dates import DateRange
from .money import Money


def json_default(value: Any) -> Any:
    """
    Serialize budgeting values that json cannot encode natively.

    Raises:
        TypeError: For any other type, as json.dumps expects
    """
    if isinstance(value, Money):
        return str(value)
    if isinstance(value, DateRange):
        return {"start": value.start.isoformat(), "end": value.end.isoformat()}
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Path):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def format_json(data: Any, sort_keys: bool = False) -> str:
    """
    Format data as a pretty-printed JSON string.

    Args:
        data: Data to format; budgeting value types are converted by json_default
        sort_keys: If True, sort dictionary keys (default: False)

    Returns:
        Pretty-printed JSON string with non-ASCII characters kept as-is
    """
    return json.dumps(data, indent=2, ensure_ascii=False, sort_keys=sort_keys, default=json_default)
