#!/usr/bin/env python3
"""
Mortgage Domain Models

Models for lender amortization schedules and their reconciliation against
the transaction ledger.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..core.currency import safe_parse_dollars
from ..core.dates import FinancialDate
from ..core.money import Money


class PaymentStatus(Enum):
    """Outcome of matching one installment against the ledger."""

    PAID = "paid"
    VARIANCE = "variance"
    MISSED = "missed"
    PENDING = "pending"


# Stored schedule rows were written under different names by different
# screens; the first name in each tuple is canonical.
_FIELD_ALIASES = {
    "principal": ("principal", "principal_portion"),
    "interest": ("interest", "interest_portion"),
    "remaining_balance": ("remaining_balance", "remaining_balance_after"),
    "scheduled_payment": ("scheduled_payment", "payment_amount"),
}


def _aliased(data: dict[str, Any], field: str) -> Any:
    for name in _FIELD_ALIASES[field]:
        if data.get(name) not in (None, ""):
            return data[name]
    return None


@dataclass(frozen=True)
class ScheduledInstallment:
    """
    One row of a lender's amortization table.

    Immutable once imported; principal + interest is not required to equal
    the scheduled payment.
    """

    mortgage_id: str
    payment_number: int
    due_date: FinancialDate
    scheduled_payment: Money
    principal: Money
    interest: Money
    remaining_balance: Money
    period_key: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ScheduledInstallment":
        """
        Create ScheduledInstallment from a stored schedule record.

        Args:
            data: Dictionary from the amortization schedule collection

        Returns:
            ScheduledInstallment instance
        """
        due_date = FinancialDate.from_any(data["due_date"])
        return cls(
            mortgage_id=str(data["mortgage_id"]),
            payment_number=int(data["payment_number"]),
            due_date=due_date,
            scheduled_payment=Money.from_dollars(_aliased(data, "scheduled_payment")),
            principal=Money(safe_parse_dollars(_aliased(data, "principal"))),
            interest=Money(safe_parse_dollars(_aliased(data, "interest"))),
            remaining_balance=Money(safe_parse_dollars(_aliased(data, "remaining_balance"))),
            period_key=data.get("period_key") or due_date.to_period_key(),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for storage."""
        return {
            "mortgage_id": self.mortgage_id,
            "payment_number": self.payment_number,
            "due_date": self.due_date.to_iso_string(),
            "period_key": self.period_key,
            "scheduled_payment": self.scheduled_payment.to_decimal(),
            "principal": self.principal.to_decimal(),
            "interest": self.interest.to_decimal(),
            "remaining_balance": self.remaining_balance.to_decimal(),
        }


@dataclass(frozen=True)
class ReconciledInstallment:
    """
    Scheduled installment together with the ledger payments matched to it.

    Recomputed on every reconciliation run and never stored.
    """

    installment: ScheduledInstallment
    actual_payment: Money
    paid_date: FinancialDate | None
    variance: Money
    status: PaymentStatus
    matched_transaction_ids: tuple[str, ...] = ()

    @property
    def payment_number(self) -> int:
        return self.installment.payment_number

    @property
    def due_date(self) -> FinancialDate:
        return self.installment.due_date

    @property
    def scheduled_payment(self) -> Money:
        return self.installment.scheduled_payment

    @property
    def principal(self) -> Money:
        return self.installment.principal

    @property
    def interest(self) -> Money:
        return self.installment.interest

    @property
    def remaining_balance(self) -> Money:
        return self.installment.remaining_balance

    @property
    def is_paid(self) -> bool:
        return self.status == PaymentStatus.PAID

    def to_dict(self) -> dict[str, Any]:
        """Scheduled fields plus the reconciliation outcome."""
        result = self.installment.to_dict()
        result.update(
            {
                "actual_payment": self.actual_payment.to_decimal(),
                "paid_date": self.paid_date.to_iso_string() if self.paid_date else None,
                "variance": self.variance.to_decimal(),
                "status": self.status.value,
                "matched_transaction_ids": list(self.matched_transaction_ids),
            }
        )
        return result
