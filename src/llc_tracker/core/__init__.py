"""
Core Utilities Package

Shared primitives used by the ledger and mortgage domains.

This package provides:
- Decimal-based currency parsing and formatting
- Money and FinancialDate value types
- Configuration management for environment-specific settings
- JSON helpers with consistent formatting
"""

from .config import (
    Config,
    Environment,
    ReconciliationConfig,
    get_config,
    get_data_dir,
    get_ledger_dir,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .currency import (
    format_dollars,
    parse_dollars,
    safe_parse_dollars,
    to_decimal,
)
from .dates import FinancialDate, parse_schedule_date
from .models import MORTGAGE_CATEGORY, TransactionType
from .money import Money

__all__ = [
    "MORTGAGE_CATEGORY",
    # Configuration
    "Config",
    "Environment",
    "FinancialDate",
    "Money",
    "ReconciliationConfig",
    "TransactionType",
    # Currency utilities
    "format_dollars",
    "get_config",
    "get_data_dir",
    "get_ledger_dir",
    "is_development",
    "is_production",
    "is_test",
    "parse_dollars",
    "parse_schedule_date",
    "reload_config",
    "safe_parse_dollars",
    "to_decimal",
]
