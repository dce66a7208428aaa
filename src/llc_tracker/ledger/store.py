#!/usr/bin/env python3
"""
Ledger Entity Collections

Reads and writes the entity collections kept by the tracker front end.
Each collection is a JSON array stored under the key `fpm_<entity>`; here
every key maps to a file `<ledger_dir>/fpm_<entity>.json`.

Collections:
- transaction: income/expense ledger
- mortgage: mortgages held by the LLC
- amortizationscheduleitem: imported lender schedules, all mortgages
"""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from ..core.config import get_config
from ..core.json_utils import read_json, write_json
from ..mortgage.models import ScheduledInstallment
from .models import LedgerTransaction, Mortgage

logger = logging.getLogger(__name__)

T = TypeVar("T")

TRANSACTIONS = "Transaction"
MORTGAGES = "Mortgage"
SCHEDULE_ITEMS = "AmortizationScheduleItem"


class LedgerStore:
    """File-backed access to the ledger entity collections."""

    def __init__(self, ledger_dir: str | Path | None = None, key_prefix: str = "fpm_"):
        """
        Initialize the store.

        Args:
            ledger_dir: Directory holding the collection files.
                        If None, uses config.ledger.ledger_dir
            key_prefix: Storage key prefix of the collections
        """
        if ledger_dir is None:
            config = get_config()
            ledger_dir = config.ledger.ledger_dir
            key_prefix = config.ledger.key_prefix
        self.ledger_dir = Path(ledger_dir)
        self.key_prefix = key_prefix

    def collection_path(self, entity_name: str) -> Path:
        """Path of the file holding an entity collection."""
        return self.ledger_dir / f"{self.key_prefix}{entity_name.lower()}.json"

    def load_records(self, entity_name: str) -> list[dict[str, Any]]:
        """
        Load raw records of a collection.

        Args:
            entity_name: Entity name, e.g. "Transaction"

        Returns:
            List of record dicts; empty if the collection was never written

        Raises:
            ValueError: If the file does not hold a JSON array
        """
        path = self.collection_path(entity_name)
        if not path.exists():
            return []

        data = read_json(path)
        if not isinstance(data, list):
            raise ValueError(f"Collection {path} does not contain a JSON array")
        return data

    def save_records(self, entity_name: str, records: list[dict[str, Any]]) -> None:
        """Overwrite a collection with the given records."""
        write_json(self.collection_path(entity_name), records)

    def _load_models(self, entity_name: str, factory: Callable[[dict[str, Any]], T]) -> list[T]:
        models: list[T] = []
        for record in self.load_records(entity_name):
            try:
                models.append(factory(record))
            except (KeyError, ValueError, TypeError) as e:
                record_id = record.get("id") if isinstance(record, dict) else record
                logger.warning("Skipping malformed %s record %s: %s", entity_name, record_id, e)
        return models

    def load_transactions(self) -> list[LedgerTransaction]:
        """Load the full transaction ledger."""
        return self._load_models(TRANSACTIONS, LedgerTransaction.from_dict)

    def load_mortgages(self) -> list[Mortgage]:
        """Load mortgages, most recently created first."""
        mortgages = self._load_models(MORTGAGES, Mortgage.from_dict)
        return sorted(mortgages, key=lambda m: m.created_date or "", reverse=True)

    def primary_mortgage(self) -> Mortgage | None:
        """The most recently created mortgage, or None when there is none."""
        mortgages = self.load_mortgages()
        return mortgages[0] if mortgages else None

    def get_mortgage(self, mortgage_id: str) -> Mortgage:
        """
        Look up a mortgage by id.

        Raises:
            KeyError: If no mortgage has that id
        """
        for mortgage in self.load_mortgages():
            if mortgage.id == mortgage_id:
                return mortgage
        raise KeyError(f"Mortgage not found: {mortgage_id}")

    def load_schedule(self, mortgage_id: str) -> list[ScheduledInstallment]:
        """Load one mortgage's installments ordered by payment number."""
        items = [
            item
            for item in self._load_models(SCHEDULE_ITEMS, ScheduledInstallment.from_dict)
            if item.mortgage_id == mortgage_id
        ]
        return sorted(items, key=lambda item: item.payment_number)

    def replace_schedule(self, mortgage_id: str, installments: list[ScheduledInstallment]) -> None:
        """
        Replace one mortgage's schedule, leaving other mortgages' rows intact.

        Args:
            mortgage_id: Mortgage whose rows are replaced
            installments: New installments
        """
        existing = self.load_records(SCHEDULE_ITEMS)
        kept = [r for r in existing if str(r.get("mortgage_id")) != mortgage_id]
        removed = len(existing) - len(kept)
        new_records = [item.to_dict() for item in installments]
        self.save_records(SCHEDULE_ITEMS, kept + new_records)
        logger.info(
            "Replaced schedule for mortgage %s: removed %d rows, wrote %d rows",
            mortgage_id,
            removed,
            len(new_records),
        )
