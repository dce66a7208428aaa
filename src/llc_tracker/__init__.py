"""
Family LLC Tracker - Rental Property LLC Bookkeeping

Tools for the books of a family-owned LLC that holds rental property.

Key Features:
- Mortgage payment reconciliation against the transaction ledger
- Lender amortization schedule import (CSV)
- Payment progress, current balance and next-due summaries

Domain Packages:
- core: Currency handling, dates, configuration
- ledger: Transaction, mortgage and schedule collections
- mortgage: Schedule reconciliation and summaries
- cli: Command-line interface

Example Usage:
    from llc_tracker.ledger import LedgerStore
    from llc_tracker.mortgage import ScheduleReconciler, MortgageSummary

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "Family LLC Tracker Contributors"

from .core.config import Environment, get_config
from .core.dates import FinancialDate
from .core.money import Money
from .ledger.models import LedgerTransaction, Mortgage
from .mortgage.models import PaymentStatus, ReconciledInstallment, ScheduledInstallment
from .mortgage.reconciler import ScheduleReconciler, reconcile_schedule
from .mortgage.summary import MortgageSummary

__all__ = [
    "Environment",
    "FinancialDate",
    "LedgerTransaction",
    "Money",
    "Mortgage",
    "MortgageSummary",
    "PaymentStatus",
    "ReconciledInstallment",
    "ScheduleReconciler",
    "ScheduledInstallment",
    "get_config",
    "reconcile_schedule",
]
