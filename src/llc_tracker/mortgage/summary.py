#!/usr/bin/env python3
"""
Mortgage Progress Summary

Reductions over a reconciled schedule used by the dashboard snapshot and the
mortgage overview: payment progress, current balance, last and next payments.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from ..core.money import Money
from .models import PaymentStatus, ReconciledInstallment


@dataclass(frozen=True)
class MortgageSummary:
    """Aggregate payment progress for one mortgage."""

    payments_made: int
    total_payments: int
    progress_percent: float
    current_balance: Money
    last_paid: ReconciledInstallment | None = None
    next_pending: ReconciledInstallment | None = None
    total_paid: Money = field(default_factory=Money.zero)
    total_interest_paid: Money = field(default_factory=Money.zero)
    net_variance: Money = field(default_factory=Money.zero)
    status_counts: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_schedule(cls, reconciled: Sequence[ReconciledInstallment], loan_amount: Money) -> "MortgageSummary":
        """
        Summarize a reconciled schedule.

        Args:
            reconciled: Output of ScheduleReconciler.reconcile
            loan_amount: Original loan amount, used as the balance before any payment

        Returns:
            MortgageSummary
        """
        paid = [r for r in reconciled if r.status == PaymentStatus.PAID]
        pending = [r for r in reconciled if r.status == PaymentStatus.PENDING]

        total_payments = len(reconciled)
        progress = (len(paid) / total_payments) * 100 if total_payments else 0.0

        # paid_date is always set for a paid installment
        last_paid = max(paid, key=lambda r: r.paid_date) if paid else None  # type: ignore[arg-type,return-value]
        next_pending = min(pending, key=lambda r: r.due_date) if pending else None

        if paid:
            current_balance = max(paid, key=lambda r: r.payment_number).remaining_balance
        else:
            current_balance = loan_amount

        total_paid = Money.zero()
        total_interest = Money.zero()
        net_variance = Money.zero()
        for r in reconciled:
            total_paid = total_paid + r.actual_payment
            net_variance = net_variance + r.variance
            if r.actual_payment > Money.zero():
                total_interest = total_interest + r.interest

        status_counts = {status.value: 0 for status in PaymentStatus}
        for r in reconciled:
            status_counts[r.status.value] += 1

        return cls(
            payments_made=len(paid),
            total_payments=total_payments,
            progress_percent=progress,
            current_balance=current_balance,
            last_paid=last_paid,
            next_pending=next_pending,
            total_paid=total_paid,
            total_interest_paid=total_interest,
            net_variance=net_variance,
            status_counts=status_counts,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert summary to dict for JSON serialization."""
        return {
            "payments_made": self.payments_made,
            "total_payments": self.total_payments,
            "progress_percent": round(self.progress_percent, 2),
            "current_balance": self.current_balance.to_decimal(),
            "last_paid": self.last_paid.to_dict() if self.last_paid else None,
            "next_pending": self.next_pending.to_dict() if self.next_pending else None,
            "total_paid": self.total_paid.to_decimal(),
            "total_interest_paid": self.total_interest_paid.to_decimal(),
            "net_variance": self.net_variance.to_decimal(),
            "status_counts": dict(self.status_counts),
        }
