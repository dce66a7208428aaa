#!/usr/bin/env python3
"""
Unit tests for ledger collections.

Tests loading the entity collections written by the tracker front end.
"""

import pytest

from llc_tracker.core.dates import FinancialDate
from llc_tracker.core.json_utils import read_json, write_json
from llc_tracker.core.money import Money
from llc_tracker.ledger import LedgerStore, LedgerTransaction, Mortgage
from tests.fixtures.mortgage_data import make_installment


class TestLedgerStore:
    """Test LedgerStore collection access."""

    @pytest.mark.ledger
    def test_collection_path_uses_storage_key(self, temp_dir):
        """Collections map to fpm_<entity>.json."""
        store = LedgerStore(temp_dir)
        assert store.collection_path("AmortizationScheduleItem") == temp_dir / "fpm_amortizationscheduleitem.json"

    @pytest.mark.ledger
    def test_missing_collections_are_empty(self, temp_dir):
        """A collection never written reads as empty."""
        store = LedgerStore(temp_dir)

        assert store.load_transactions() == []
        assert store.load_mortgages() == []
        assert store.load_schedule("mtg-1") == []
        assert store.primary_mortgage() is None

    @pytest.mark.ledger
    def test_load_transactions(self, ledger_dir):
        """Records become LedgerTransaction models."""
        transactions = LedgerStore(ledger_dir).load_transactions()

        assert len(transactions) == 4
        first = transactions[0]
        assert isinstance(first, LedgerTransaction)
        assert first.date == FinancialDate.from_string("2024-01-28")
        assert first.amount == Money.from_dollars("2000")
        assert first.is_mortgage_expense
        assert not transactions[3].is_mortgage_expense

    @pytest.mark.ledger
    def test_malformed_records_are_skipped(self, temp_dir):
        """Bad rows are logged and dropped, good rows survive."""
        write_json(
            temp_dir / "fpm_transaction.json",
            [
                {"id": "ok", "date": "2024-01-28", "amount": 10, "type": "expense", "category": "mortgage"},
                {"id": "no-date", "amount": 10},
                {"id": "bad-amount", "date": "2024-01-28", "amount": "lots"},
            ],
        )

        transactions = LedgerStore(temp_dir).load_transactions()

        assert [t.id for t in transactions] == ["ok"]

    @pytest.mark.ledger
    def test_non_object_records_are_skipped(self, temp_dir):
        """Strings, numbers and nulls in a collection are dropped with a warning."""
        write_json(
            temp_dir / "fpm_transaction.json",
            [
                "garbage",
                42,
                None,
                {"id": "ok", "date": "2024-01-28", "amount": 10, "type": "expense", "category": "mortgage"},
            ],
        )

        transactions = LedgerStore(temp_dir).load_transactions()

        assert [t.id for t in transactions] == ["ok"]

    @pytest.mark.ledger
    def test_untyped_transaction_is_skipped(self, temp_dir):
        """A record without a type is malformed, never an expense."""
        write_json(
            temp_dir / "fpm_transaction.json",
            [{"id": "x", "date": "2024-01-28", "amount": 2000, "category": "mortgage"}],
        )

        assert LedgerStore(temp_dir).load_transactions() == []

    @pytest.mark.ledger
    def test_non_array_collection_raises(self, temp_dir):
        """A corrupted collection file is an error."""
        write_json(temp_dir / "fpm_transaction.json", {"transactions": []})

        with pytest.raises(ValueError, match="JSON array"):
            LedgerStore(temp_dir).load_transactions()

    @pytest.mark.ledger
    def test_mortgages_newest_first(self, temp_dir, sample_mortgage_record):
        """Primary mortgage is the most recently created."""
        older = dict(sample_mortgage_record, id="old", created_date="2023-05-01T00:00:00.000Z")
        newer = dict(sample_mortgage_record, id="new", created_date="2024-06-01T00:00:00.000Z")
        write_json(temp_dir / "fpm_mortgage.json", [older, newer])

        store = LedgerStore(temp_dir)

        assert [m.id for m in store.load_mortgages()] == ["new", "old"]
        assert store.primary_mortgage().id == "new"

    @pytest.mark.ledger
    def test_get_mortgage(self, ledger_dir):
        """Lookup by id, KeyError when absent."""
        store = LedgerStore(ledger_dir)

        mortgage = store.get_mortgage("mtg-1")
        assert isinstance(mortgage, Mortgage)
        assert mortgage.loan_amount == Money.from_dollars("300000")
        assert mortgage.start_date == FinancialDate.from_string("2024-01-01")

        with pytest.raises(KeyError):
            store.get_mortgage("missing")

    @pytest.mark.ledger
    def test_load_schedule_filters_and_sorts(self, temp_dir, sample_schedule_records):
        """Only the requested mortgage's rows, by payment number."""
        other = dict(sample_schedule_records[0], mortgage_id="mtg-2")
        write_json(
            temp_dir / "fpm_amortizationscheduleitem.json",
            list(reversed(sample_schedule_records)) + [other],
        )

        schedule = LedgerStore(temp_dir).load_schedule("mtg-1")

        assert [i.payment_number for i in schedule] == [1, 2, 3]

    @pytest.mark.ledger
    def test_replace_schedule_keeps_other_mortgages(self, ledger_dir, sample_schedule_records):
        """Replacing one mortgage's rows leaves others untouched."""
        store = LedgerStore(ledger_dir)
        path = store.collection_path("AmortizationScheduleItem")
        write_json(path, sample_schedule_records + [dict(sample_schedule_records[0], mortgage_id="mtg-2")])

        store.replace_schedule("mtg-1", [make_installment(1, "2024-02-01", scheduled="2100.00")])

        records = read_json(path)
        assert sorted(r["mortgage_id"] for r in records) == ["mtg-1", "mtg-2"]
        assert store.load_schedule("mtg-1")[0].scheduled_payment == Money.from_dollars("2100.00")
        assert len(store.load_schedule("mtg-2")) == 1


class TestLedgerModels:
    """Record conversion."""

    @pytest.mark.ledger
    def test_transaction_accepts_timestamp_dates(self):
        """Time of day is discarded."""
        tx = LedgerTransaction.from_dict(
            {"id": 7, "date": "2024-01-28T15:30:00.000Z", "amount": "2,000.00", "type": "expense", "category": "mortgage"}
        )

        assert tx.id == "7"
        assert tx.date == FinancialDate.from_string("2024-01-28")
        assert tx.amount == Money.from_dollars("2000")

    @pytest.mark.ledger
    def test_transaction_round_trip_fields(self):
        """to_dict writes stored field names."""
        tx = LedgerTransaction.from_dict(
            {"id": "a", "date": "2024-01-28", "amount": 12.5, "type": "income", "category": "rent", "vendor": "Tenant"}
        )
        data = tx.to_dict()

        assert data["date"] == "2024-01-28"
        assert data["type"] == "income"
        assert data["vendor"] == "Tenant"

    @pytest.mark.ledger
    def test_mortgage_optional_fields(self, sample_mortgage_record):
        """Blank optional fields become None."""
        record = dict(sample_mortgage_record, monthly_payment="", loan_number="", notes="")
        mortgage = Mortgage.from_dict(record)

        assert mortgage.monthly_payment is None
        assert mortgage.loan_number is None
        assert mortgage.interest_rate == 6.5
        assert mortgage.term_years == 30

    @pytest.mark.ledger
    def test_transaction_requires_type(self):
        """An untyped record is rejected rather than assumed to be an expense."""
        with pytest.raises(KeyError):
            LedgerTransaction.from_dict({"id": "x", "date": "2024-01-28", "amount": 2000, "category": "mortgage"})
