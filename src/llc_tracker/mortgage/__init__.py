"""
Mortgage Package

Lender amortization schedules reconciled against the LLC's transaction ledger.

Key Components:
- models: ScheduledInstallment, ReconciledInstallment, PaymentStatus
- reconciler: ScheduleReconciler, matching ledger payments to installments
- summary: MortgageSummary, payment progress and current balance
- schedule_import: lender CSV import and tabular export

Matching Rules:
- Only expenses in the "mortgage" category dated on/after the loan start count
- A payment matches an installment when dated on the due date or up to 30 days before it
- All matching payments accumulate into one installment; each payment is used once
- Installments claim payments in payment-number order
- |actual - scheduled| <= $0.01 is paid, otherwise variance; unpaid past due is missed
"""

from .models import PaymentStatus, ReconciledInstallment, ScheduledInstallment
from .reconciler import (
    DEFAULT_MATCH_WINDOW_DAYS,
    DEFAULT_VARIANCE_TOLERANCE,
    ScheduleReconciler,
    reconcile_schedule,
)
from .schedule_import import (
    ScheduleImportError,
    import_schedule,
    parse_schedule_csv,
    parse_schedule_text,
    schedule_to_dataframe,
)
from .summary import MortgageSummary

__all__ = [
    "DEFAULT_MATCH_WINDOW_DAYS",
    "DEFAULT_VARIANCE_TOLERANCE",
    "MortgageSummary",
    "PaymentStatus",
    "ReconciledInstallment",
    "ScheduleImportError",
    "ScheduleReconciler",
    "ScheduledInstallment",
    "import_schedule",
    "parse_schedule_csv",
    "parse_schedule_text",
    "reconcile_schedule",
    "schedule_to_dataframe",
]
