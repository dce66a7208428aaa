#!/usr/bin/env python3
"""
Mortgage Payment Reconciliation

Matches a lender amortization schedule against the transaction ledger.

Each installment claims every eligible, not-yet-claimed mortgage payment dated
on its due date or up to `match_window_days` before it. Installments are
visited in payment-number order, so an earlier installment claims a payment
before a later one can, and a payment counts toward at most one installment.
Payments dated after a due date never satisfy that installment.
"""

import logging
from collections.abc import Iterable, Sequence
from decimal import Decimal

from ..core.dates import FinancialDate
from ..core.money import Money
from ..ledger.models import LedgerTransaction
from .models import PaymentStatus, ReconciledInstallment, ScheduledInstallment

logger = logging.getLogger(__name__)

DEFAULT_MATCH_WINDOW_DAYS = 30
DEFAULT_VARIANCE_TOLERANCE = Money(Decimal("0.01"))


class ScheduleReconciler:
    """Assigns ledger payments to scheduled installments and classifies them."""

    def __init__(
        self,
        match_window_days: int = DEFAULT_MATCH_WINDOW_DAYS,
        variance_tolerance: Money = DEFAULT_VARIANCE_TOLERANCE,
    ):
        """
        Initialize the reconciler.

        Args:
            match_window_days: How many days before a due date a payment may arrive
            variance_tolerance: Largest absolute difference still treated as paid in full
        """
        self.match_window_days = match_window_days
        self.variance_tolerance = variance_tolerance

    def eligible_transactions(
        self, transactions: Iterable[LedgerTransaction], mortgage_start_date: FinancialDate
    ) -> list[LedgerTransaction]:
        """
        Restrict the ledger to mortgage expenses dated on or after the loan start.

        Args:
            transactions: Full, unfiltered ledger
            mortgage_start_date: Start date of the mortgage

        Returns:
            Eligible transactions ordered by date, then id
        """
        eligible = [t for t in transactions if t.is_mortgage_expense and t.date >= mortgage_start_date]
        return sorted(eligible, key=lambda t: (t.date, t.id))

    def reconcile(
        self,
        schedule: Sequence[ScheduledInstallment],
        transactions: Iterable[LedgerTransaction],
        mortgage_start_date: FinancialDate,
        as_of: FinancialDate | None = None,
    ) -> list[ReconciledInstallment]:
        """
        Reconcile one mortgage's schedule against the ledger.

        Args:
            schedule: Installments of a single mortgage
            transactions: Full, unfiltered ledger
            mortgage_start_date: Start date of the mortgage
            as_of: Date deciding missed vs pending (default: today)

        Returns:
            Reconciled installments, same length and order as `schedule`
        """
        if as_of is None:
            as_of = FinancialDate.today()

        eligible = self.eligible_transactions(transactions, mortgage_start_date)

        # Claiming is order dependent, so visit installments by payment number
        # and restore the caller's order afterwards.
        visit_order = sorted(range(len(schedule)), key=lambda i: schedule[i].payment_number)

        used_ids: frozenset[str] = frozenset()
        results: dict[int, ReconciledInstallment] = {}
        for index in visit_order:
            results[index], used_ids = self._reconcile_installment(schedule[index], eligible, used_ids, as_of)

        reconciled = [results[i] for i in range(len(schedule))]

        logger.info(
            "Reconciled %d installments against %d eligible transactions (%d claimed)",
            len(reconciled),
            len(eligible),
            len(used_ids),
        )
        return reconciled

    def _reconcile_installment(
        self,
        installment: ScheduledInstallment,
        eligible: list[LedgerTransaction],
        used_ids: frozenset[str],
        as_of: FinancialDate,
    ) -> tuple[ReconciledInstallment, frozenset[str]]:
        """
        Match a single installment and return the updated set of claimed ids.

        Args:
            installment: Installment to match
            eligible: Eligible transactions ordered by date, then id
            used_ids: Transaction ids claimed by earlier installments
            as_of: Date deciding missed vs pending

        Returns:
            Tuple of (reconciled installment, claimed ids including this installment's)
        """
        candidates = [
            t
            for t in eligible
            if t.id not in used_ids
            and 0 <= t.date.days_until(installment.due_date) <= self.match_window_days
        ]

        actual_payment = Money.zero()
        for t in candidates:
            actual_payment = actual_payment + t.amount

        paid_date = None
        if candidates:
            paid_date = max(t.date for t in candidates)
            used_ids = used_ids | {t.id for t in candidates}

        if actual_payment > Money.zero():
            variance = actual_payment - installment.scheduled_payment
        else:
            variance = Money.zero()

        status = self._classify(installment, actual_payment, variance, as_of)

        logger.debug(
            "Payment #%d due %s: %d matches, actual %s, status %s",
            installment.payment_number,
            installment.due_date,
            len(candidates),
            actual_payment,
            status.value,
        )

        reconciled = ReconciledInstallment(
            installment=installment,
            actual_payment=actual_payment,
            paid_date=paid_date,
            variance=variance,
            status=status,
            matched_transaction_ids=tuple(t.id for t in candidates),
        )
        return reconciled, used_ids

    def _classify(
        self,
        installment: ScheduledInstallment,
        actual_payment: Money,
        variance: Money,
        as_of: FinancialDate,
    ) -> PaymentStatus:
        """Status priority: paid, variance, missed, pending."""
        if actual_payment > Money.zero():
            if variance.abs() <= self.variance_tolerance:
                return PaymentStatus.PAID
            return PaymentStatus.VARIANCE
        if installment.due_date < as_of:
            return PaymentStatus.MISSED
        return PaymentStatus.PENDING


def reconcile_schedule(
    schedule: Sequence[ScheduledInstallment],
    transactions: Iterable[LedgerTransaction],
    mortgage_start_date: FinancialDate,
    as_of: FinancialDate | None = None,
    match_window_days: int = DEFAULT_MATCH_WINDOW_DAYS,
    variance_tolerance: Money = DEFAULT_VARIANCE_TOLERANCE,
) -> list[ReconciledInstallment]:
    """
    Reconcile a schedule with a one-off reconciler.

    Args:
        schedule: Installments of a single mortgage
        transactions: Full, unfiltered ledger
        mortgage_start_date: Start date of the mortgage
        as_of: Date deciding missed vs pending (default: today)
        match_window_days: How many days before a due date a payment may arrive
        variance_tolerance: Largest absolute difference still treated as paid in full

    Returns:
        Reconciled installments, same length and order as `schedule`
    """
    reconciler = ScheduleReconciler(match_window_days, variance_tolerance)
    return reconciler.reconcile(schedule, transactions, mortgage_start_date, as_of)
