#!/usr/bin/env python3
"""
Search Query Model

The structured form of a free-text search box entry, produced by
SearchQueryParser and consumed by the matchers.
"""

from dataclasses import dataclass
from typing import Any

from ..core.dates import DateRange


@dataclass(frozen=True)
class SearchQuery:
    """
    Immutable parsed search query.

    Attributes:
        raw: Original input string, unmodified
        text_terms: Lower-cased tokens matched against text fields (AND)
        amount_digit_terms: Digit-only tokens matched against amount
            renderings (AND), e.g. "33" matches $12.33
        date_range: Day-aligned inclusive range, or None when no complete
            date was typed
    """

    raw: str
    text_terms: tuple[str, ...] = ()
    amount_digit_terms: tuple[str, ...] = ()
    date_range: DateRange | None = None

    @classmethod
    def empty(cls, raw: str = "") -> "SearchQuery":
        """A query that matches everything."""
        return cls(raw=raw)

    @property
    def trimmed(self) -> str:
        """Raw input without leading/trailing whitespace."""
        return self.raw.strip()

    @property
    def is_empty(self) -> bool:
        """True when nothing but whitespace was typed."""
        return not self.trimmed

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "raw": self.raw,
            "trimmed": self.trimmed,
            "text_terms": list(self.text_terms),
            "amount_digit_terms": list(self.amount_digit_terms),
            "date_range": (
                {
                    "start": self.date_range.start.isoformat(),
                    "end": self.date_range.end.isoformat(),
                }
                if self.date_range
                else None
            ),
        }
