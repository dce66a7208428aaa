#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses Decimal dollars internally.
Prevents floating-point errors and provides type-safe currency operations.
"""

from dataclasses import dataclass
from decimal import Decimal

from .currency import AmountLike, format_dollars, to_decimal


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in dollars (USD).

    Keeps full Decimal precision so that sub-cent amounts from lender
    schedules compare exactly. Rounding is applied only by __str__.

    Examples:
        >>> payment = Money.from_dollars("$2,000.00")
        >>> str(payment)
        '$2,000.00'

        >>> extra = Money.from_dollars("50")
        >>> str(payment + extra)
        '$2,050.00'

        >>> (extra - payment).abs()
        Money(amount=Decimal('1950.00'))
    """

    amount: Decimal

    @classmethod
    def from_dollars(cls, dollars: AmountLike) -> "Money":
        """
        Parse from dollar string like '$123.45', a number or a Decimal.

        Args:
            dollars: String like "$12.34", integer like 12, or Decimal

        Returns:
            Money object

        Raises:
            ValueError: If the value is not a valid amount
        """
        return cls(amount=to_decimal(dollars))

    @classmethod
    def zero(cls) -> "Money":
        """Create a zero amount."""
        return cls(amount=Decimal("0"))

    def to_decimal(self) -> Decimal:
        """Get value in dollars."""
        return self.amount

    def to_dollars(self) -> str:
        """Get formatted dollar string."""
        return str(self)

    def is_zero(self) -> bool:
        """Check whether the amount is exactly zero."""
        return self.amount == 0

    def abs(self) -> "Money":
        """Return absolute value of Money."""
        return Money(amount=abs(self.amount))

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        return Money(amount=self.amount + other.amount)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money objects."""
        return Money(amount=self.amount - other.amount)

    def __mul__(self, scalar: int) -> "Money":
        """Multiply Money by integer scalar."""
        return Money(amount=self.amount * scalar)

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.amount == other.amount

    def __hash__(self) -> int:
        return hash(self.amount)

    def __lt__(self, other: "Money") -> bool:
        """Less than comparison."""
        return self.amount < other.amount

    def __le__(self, other: "Money") -> bool:
        """Less than or equal comparison."""
        return self.amount <= other.amount

    def __gt__(self, other: "Money") -> bool:
        """Greater than comparison."""
        return self.amount > other.amount

    def __ge__(self, other: "Money") -> bool:
        """Greater than or equal comparison."""
        return self.amount >= other.amount

    def __str__(self) -> str:
        """Format as dollar string."""
        return format_dollars(self.amount)

    def __repr__(self) -> str:
        """Repr format."""
        return f"Money(amount={self.amount!r})"
