#!/usr/bin/env python3
"""
FinancialDate Primitive Type

Immutable date wrapper with consistent formatting for financial operations.
Provides standardized date handling across ledger entries, lender schedules
and reconciliation output.
"""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True, order=True)
class FinancialDate:
    """Immutable financial date wrapper with consistent formatting."""

    date: date

    @classmethod
    def from_string(cls, date_str: str, format: str = "%Y-%m-%d") -> "FinancialDate":
        """
        Parse from string in specified format.

        Args:
            date_str: Date string to parse
            format: Date format (default: ISO format "%Y-%m-%d")

        Returns:
            FinancialDate object
        """
        return cls(date=datetime.strptime(date_str, format).date())

    @classmethod
    def from_any(cls, value: "str | date | datetime | FinancialDate") -> "FinancialDate":
        """
        Coerce a stored date value to a FinancialDate.

        Ledger collections store ISO dates ("2024-01-28") and sometimes full
        ISO timestamps ("2024-01-28T00:00:00.000Z"); the time of day is dropped.

        Args:
            value: ISO string, date, datetime or FinancialDate

        Returns:
            FinancialDate object

        Raises:
            ValueError: If the string is not an ISO date
            TypeError: If the value has an unsupported type
        """
        if isinstance(value, FinancialDate):
            return value
        if isinstance(value, datetime):
            return cls(date=value.date())
        if isinstance(value, date):
            return cls(date=value)
        if isinstance(value, str):
            return cls.from_string(value.strip()[:10])
        raise TypeError(f"Cannot convert {type(value).__name__} to FinancialDate")

    @classmethod
    def today(cls) -> "FinancialDate":
        """Get today's date."""
        return cls(date=date.today())

    def to_iso_string(self) -> str:
        """Format as YYYY-MM-DD."""
        return self.date.isoformat()

    def to_period_key(self) -> str:
        """Format as YYYY-MM."""
        return self.date.strftime("%Y-%m")

    def days_until(self, other: "FinancialDate") -> int:
        """
        Calculate whole days from this date to another.

        Args:
            other: Later (or earlier) date

        Returns:
            other - self in days; negative when other is earlier
        """
        return (other.date - self.date).days

    def age_days(self, other: "FinancialDate | None" = None) -> int:
        """
        Calculate days between this date and another (or today).

        Args:
            other: Other date to compare to (default: today)

        Returns:
            Number of days difference
        """
        if other is None:
            other = FinancialDate.today()
        return self.days_until(other)

    def __str__(self) -> str:
        """String representation."""
        return self.to_iso_string()

    def __repr__(self) -> str:
        """Repr format."""
        return f"FinancialDate(date={self.date!r})"


def parse_schedule_date(date_str: str) -> FinancialDate:
    """
    Parse a due date as printed in lender amortization exports.

    Lenders print M/D/YY or M/D/YYYY; two-digit years are taken as 20YY.
    ISO YYYY-MM-DD is accepted as well.

    Args:
        date_str: Date text from the CSV cell

    Returns:
        FinancialDate object

    Raises:
        ValueError: If the text is not a recognizable date
    """
    text = date_str.strip()
    parts = text.split("/")
    if len(parts) == 3:
        month, day, year = (int(p) for p in parts)
        if year < 100:
            year += 2000
        return FinancialDate(date=date(year, month, day))
    return FinancialDate.from_string(text)
