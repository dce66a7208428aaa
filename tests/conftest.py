"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from datetime import date
from pathlib import Path
from typing import Any

import pytest

from llc_tracker.core import config as config_module
from llc_tracker.core.dates import FinancialDate
from llc_tracker.core.json_utils import write_json


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def mortgage_start() -> FinancialDate:
    """Start date shared by the sample mortgage."""
    return FinancialDate(date=date(2024, 1, 1))


@pytest.fixture
def sample_mortgage_record() -> dict[str, Any]:
    """Sample stored mortgage record."""
    return {
        "id": "mtg-1",
        "property_address": "12 Elm Street",
        "lender_name": "First Community Bank",
        "loan_amount": 300000,
        "interest_rate": 6.5,
        "term_years": 30,
        "start_date": "2024-01-01",
        "monthly_payment": 2000,
        "loan_number": "LN-0042",
        "created_date": "2024-01-02T10:00:00.000Z",
    }


@pytest.fixture
def sample_schedule_records() -> list[dict[str, Any]]:
    """Three monthly installments as stored by the schedule import."""
    return [
        {
            "mortgage_id": "mtg-1",
            "payment_number": n,
            "due_date": due,
            "period_key": due[:7],
            "scheduled_payment": 2000.0,
            "principal": 375.0 + n,
            "interest": 1625.0 - n,
            "remaining_balance": 300000.0 - 376.0 * n,
        }
        for n, due in [(1, "2024-02-01"), (2, "2024-03-01"), (3, "2024-04-01")]
    ]


@pytest.fixture
def sample_transaction_records() -> list[dict[str, Any]]:
    """Ledger with two mortgage payments and unrelated entries."""
    return [
        {"id": "t1", "date": "2024-01-28", "amount": 2000, "type": "expense", "category": "mortgage"},
        {"id": "t2", "date": "2024-02-27", "amount": 2050, "type": "expense", "category": "mortgage"},
        {"id": "t3", "date": "2024-02-15", "amount": 2000, "type": "expense", "category": "repairs"},
        {"id": "t4", "date": "2024-02-20", "amount": 2000, "type": "income", "category": "rent"},
    ]


@pytest.fixture
def ledger_dir(temp_dir, sample_mortgage_record, sample_schedule_records, sample_transaction_records) -> Path:
    """Ledger directory populated with the sample collections."""
    ledger = temp_dir / "ledger"
    write_json(ledger / "fpm_mortgage.json", [sample_mortgage_record])
    write_json(ledger / "fpm_amortizationscheduleitem.json", sample_schedule_records)
    write_json(ledger / "fpm_transaction.json", sample_transaction_records)
    return ledger


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Set up test environment variables."""
    # Ensure tests don't use real ledger data
    monkeypatch.setenv("LLC_ENV", "test")
    monkeypatch.setenv("LLC_DATA_DIR", str(Path(tempfile.gettempdir()) / "test_llc_tracker_data"))
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.delenv("MATCH_WINDOW_DAYS", raising=False)
    monkeypatch.delenv("VARIANCE_TOLERANCE", raising=False)

    # Each test reads configuration from its own environment
    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "mortgage: Tests for mortgage schedule reconciliation")
    config.addinivalue_line("markers", "ledger: Tests for ledger collections")
