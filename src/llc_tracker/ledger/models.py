#!/usr/bin/env python3
"""
Ledger Domain Models

Type-safe models for the entity collections kept by the tracker front end.
Field names follow the stored records (snake_case, as written to storage).
"""

from dataclasses import dataclass
from typing import Any

from ..core.dates import FinancialDate
from ..core.models import MORTGAGE_CATEGORY, TransactionType
from ..core.money import Money


@dataclass(frozen=True)
class LedgerTransaction:
    """
    Income or expense entry from the transaction ledger.

    Amounts are always positive; direction is carried by `type`.
    """

    id: str
    date: FinancialDate
    amount: Money
    type: str
    category: str
    description: str | None = None
    vendor: str | None = None

    @property
    def is_mortgage_expense(self) -> bool:
        """True for expense entries booked to the mortgage category."""
        return self.type == TransactionType.EXPENSE.value and self.category == MORTGAGE_CATEGORY

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LedgerTransaction":
        """
        Create LedgerTransaction from a stored record.

        Args:
            data: Dictionary from the transaction collection

        Returns:
            LedgerTransaction instance
        """
        return cls(
            id=str(data["id"]),
            date=FinancialDate.from_any(data["date"]),
            amount=Money.from_dollars(data["amount"]),
            type=data["type"],
            category=data.get("category") or "",
            description=data.get("description"),
            vendor=data.get("vendor"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "date": self.date.to_iso_string(),
            "amount": self.amount.to_decimal(),
            "type": self.type,
            "category": self.category,
            "description": self.description,
            "vendor": self.vendor,
        }


@dataclass(frozen=True)
class Mortgage:
    """Mortgage held by the LLC on one of its properties."""

    id: str
    property_address: str
    lender_name: str
    loan_amount: Money
    interest_rate: float
    term_years: int
    start_date: FinancialDate

    monthly_payment: Money | None = None
    loan_number: str | None = None
    notes: str | None = None
    created_date: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Mortgage":
        """
        Create Mortgage from a stored record.

        Args:
            data: Dictionary from the mortgage collection

        Returns:
            Mortgage instance
        """
        monthly = data.get("monthly_payment")
        return cls(
            id=str(data["id"]),
            property_address=data.get("property_address", ""),
            lender_name=data.get("lender_name", ""),
            loan_amount=Money.from_dollars(data["loan_amount"]),
            interest_rate=float(data.get("interest_rate") or 0),
            term_years=int(data.get("term_years") or 0),
            start_date=FinancialDate.from_any(data["start_date"]),
            monthly_payment=Money.from_dollars(monthly) if monthly not in (None, "") else None,
            loan_number=data.get("loan_number") or None,
            notes=data.get("notes") or None,
            created_date=data.get("created_date"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "property_address": self.property_address,
            "lender_name": self.lender_name,
            "loan_amount": self.loan_amount.to_decimal(),
            "interest_rate": self.interest_rate,
            "term_years": self.term_years,
            "start_date": self.start_date.to_iso_string(),
            "monthly_payment": self.monthly_payment.to_decimal() if self.monthly_payment else None,
            "loan_number": self.loan_number,
            "notes": self.notes,
            "created_date": self.created_date,
        }
