"""
Ledger Package

Read/write access to the tracker's entity collections (transactions,
mortgages, imported amortization schedules) and their domain models.
"""

from .models import LedgerTransaction, Mortgage
from .store import LedgerStore

__all__ = [
    "LedgerStore",
    "LedgerTransaction",
    "Mortgage",
]
