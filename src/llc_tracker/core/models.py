#!/usr/bin/env python3
"""
Core Data Models for the Family LLC Tracker

Enumerations and constants shared by the ledger and mortgage domains.
"""

from enum import Enum


class TransactionType(Enum):
    """Types of ledger transactions."""

    EXPENSE = "expense"
    INCOME = "income"


# Ledger category that marks a transaction as a mortgage payment
MORTGAGE_CATEGORY = "mortgage"
