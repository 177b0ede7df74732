#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer cents internally.
Prevents floating-point errors and provides type-safe currency operations.
"""

from dataclasses import dataclass
from decimal import Decimal

from .currency import amount_digits, format_cents, parse_dollars_to_cents


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in cents (USD).

    Examples:
        >>> coffee = Money.from_dollars("$12.33")
        >>> str(coffee)
        '$12.33'
        >>> coffee.to_decimal()
        Decimal('12.33')
        >>> coffee.search_digits()
        '1233'
    """

    cents: int

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create Money from cents."""
        return cls(cents=cents)

    @classmethod
    def from_dollars(cls, dollars: str | int | float | Decimal) -> "Money":
        """
        Parse from dollar string like '$123.45' or a numeric dollar value.

        Args:
            dollars: String like "$12.34", integer like 12, or 12.34

        Returns:
            Money object
        """
        if isinstance(dollars, int):
            return cls(cents=dollars * 100)
        if isinstance(dollars, (float, Decimal)):
            return cls(cents=int((Decimal(str(dollars)) * 100).to_integral_value()))
        return cls(cents=parse_dollars_to_cents(dollars))

    @classmethod
    def zero(cls) -> "Money":
        """Zero dollars."""
        return cls(cents=0)

    def to_cents(self) -> int:
        """Get value in cents."""
        return self.cents

    def to_decimal(self) -> Decimal:
        """Get value in dollars as an exact Decimal."""
        return Decimal(self.cents) / 100

    def search_digits(self) -> str:
        """Digit-only rendering used by amount search."""
        return amount_digits(self.to_decimal())

    def is_zero(self) -> bool:
        """Check whether the amount is exactly zero."""
        return self.cents == 0

    def abs(self) -> "Money":
        """Return absolute value of Money."""
        return Money(cents=abs(self.cents))

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        return Money(cents=self.cents + other.cents)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money objects."""
        return Money(cents=self.cents - other.cents)

    def __lt__(self, other: "Money") -> bool:
        return self.cents < other.cents

    def __le__(self, other: "Money") -> bool:
        return self.cents <= other.cents

    def __gt__(self, other: "Money") -> bool:
        return self.cents > other.cents

    def __ge__(self, other: "Money") -> bool:
        return self.cents >= other.cents

    def __str__(self) -> str:
        """Format as dollar string."""
        return format_cents(self.cents)

    def __repr__(self) -> str:
        return f"Money(cents={self.cents})"
