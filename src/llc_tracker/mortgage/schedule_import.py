#!/usr/bin/env python3
"""
Amortization Schedule Import

Loads a lender's amortization schedule export (CSV) into ScheduledInstallment
models and replaces a mortgage's stored schedule wholesale.

Expected columns (matched case-insensitively on header text):
- "Payment #"          optional, defaults to row position
- "Due Date"           required, M/D/YY, M/D/YYYY or YYYY-MM-DD
- "Scheduled Payment"  required
- "Principal", "Interest", "Remaining Balance"  optional, blank reads as 0

Lender exports sometimes carry "Actual Payment", "Status" and "Variance"
columns; those are ignored because they are derived by reconciliation.
"""

import logging
from collections.abc import Sequence
from io import StringIO
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any

import pandas as pd

from ..core.currency import parse_dollars, safe_parse_dollars
from ..core.dates import parse_schedule_date
from ..core.money import Money
from .models import ReconciledInstallment, ScheduledInstallment

if TYPE_CHECKING:
    from ..ledger.store import LedgerStore

logger = logging.getLogger(__name__)


class ScheduleImportError(ValueError):
    """Raised when a schedule file cannot be imported."""


def _find_column(headers: Sequence[str], *required_words: str, exact: str | None = None) -> str | None:
    """Return the first header containing all words (or equal to `exact`)."""
    for header in headers:
        lowered = header.lower()
        if exact is not None:
            if lowered == exact:
                return header
        elif all(word in lowered for word in required_words):
            return header
    return None


def _cell(row: dict[str, Any], column: str | None) -> str:
    """Get a trimmed cell value, '' for missing columns or cells."""
    if column is None:
        return ""
    value = row.get(column)
    if not isinstance(value, str):
        return ""
    return value.strip().strip('"').strip()


def parse_schedule_csv(source: str | Path | IO[str], mortgage_id: str) -> list[ScheduledInstallment]:
    """
    Parse a lender amortization CSV.

    Args:
        source: Path to the CSV file or an open text stream
        mortgage_id: Mortgage the installments belong to

    Returns:
        Installments in file order

    Raises:
        ScheduleImportError: If required columns are missing or no row is valid
    """
    try:
        df = pd.read_csv(source, dtype=str, keep_default_na=False, skipinitialspace=True)
    except pd.errors.EmptyDataError as e:
        raise ScheduleImportError("Schedule CSV is empty") from e
    except pd.errors.ParserError as e:
        raise ScheduleImportError(f"Could not parse schedule CSV: {e}") from e

    df.columns = [str(c).strip().strip('"').strip() for c in df.columns]
    headers = list(df.columns)

    payment_col = _find_column(headers, "payment", "#")
    due_col = _find_column(headers, "due", "date")
    scheduled_col = _find_column(headers, "scheduled", "payment")
    interest_col = _find_column(headers, exact="interest")
    principal_col = _find_column(headers, exact="principal")
    balance_col = _find_column(headers, "remaining", "balance")

    if due_col is None or scheduled_col is None:
        raise ScheduleImportError('Could not find required columns "Due Date" and "Scheduled Payment" in CSV')

    installments: list[ScheduledInstallment] = []
    for position, row in enumerate(df.to_dict(orient="records"), start=1):
        due_text = _cell(row, due_col)
        scheduled_text = _cell(row, scheduled_col)
        if not due_text or not scheduled_text:
            logger.debug("Skipping row %d: missing due date or scheduled payment", position)
            continue

        try:
            due_date = parse_schedule_date(due_text)
            scheduled = parse_dollars(scheduled_text)
            payment_text = _cell(row, payment_col)
            payment_number = int(payment_text) if payment_text else position
        except ValueError as e:
            logger.warning("Skipping row %d: %s", position, e)
            continue

        installments.append(
            ScheduledInstallment(
                mortgage_id=mortgage_id,
                payment_number=payment_number,
                due_date=due_date,
                scheduled_payment=Money(scheduled),
                principal=Money(safe_parse_dollars(_cell(row, principal_col))),
                interest=Money(safe_parse_dollars(_cell(row, interest_col))),
                remaining_balance=Money(safe_parse_dollars(_cell(row, balance_col))),
                period_key=due_date.to_period_key(),
            )
        )

    if not installments:
        raise ScheduleImportError("No valid payment data found in CSV. Check format and try again.")

    logger.info("Parsed %d installments for mortgage %s", len(installments), mortgage_id)
    return installments


def parse_schedule_text(csv_text: str, mortgage_id: str) -> list[ScheduledInstallment]:
    """Parse pasted CSV text; see parse_schedule_csv."""
    if not csv_text.strip():
        raise ScheduleImportError("No CSV data provided")
    return parse_schedule_csv(StringIO(csv_text.strip()), mortgage_id)


def import_schedule(
    store: "LedgerStore", mortgage_id: str, source: str | Path | IO[str]
) -> list[ScheduledInstallment]:
    """
    Replace a mortgage's stored schedule with the contents of a CSV.

    The file is fully parsed before anything is deleted, so a bad file leaves
    the existing schedule in place.

    Args:
        store: Ledger collections
        mortgage_id: Mortgage whose schedule is replaced
        source: Path to the CSV file or an open text stream

    Returns:
        Installments written

    Raises:
        ScheduleImportError: If the CSV is invalid
        KeyError: If the mortgage does not exist
    """
    store.get_mortgage(mortgage_id)
    installments = parse_schedule_csv(source, mortgage_id)
    store.replace_schedule(mortgage_id, installments)
    return installments


def schedule_to_dataframe(reconciled: Sequence[ReconciledInstallment]) -> pd.DataFrame:
    """
    Convert a reconciled schedule to a DataFrame for tabular display.

    Args:
        reconciled: Output of ScheduleReconciler.reconcile

    Returns:
        DataFrame with one row per installment, amounts as Decimal
    """
    columns = [
        "payment_number",
        "due_date",
        "paid_date",
        "scheduled_payment",
        "principal",
        "interest",
        "actual_payment",
        "variance",
        "remaining_balance",
        "status",
    ]
    rows = [
        {
            "payment_number": r.payment_number,
            "due_date": r.due_date.to_iso_string(),
            "paid_date": r.paid_date.to_iso_string() if r.paid_date else "",
            "scheduled_payment": r.scheduled_payment.to_decimal(),
            "principal": r.principal.to_decimal(),
            "interest": r.interest.to_decimal(),
            "actual_payment": r.actual_payment.to_decimal(),
            "variance": r.variance.to_decimal(),
            "remaining_balance": r.remaining_balance.to_decimal(),
            "status": r.status.value,
        }
        for r in reconciled
    ]
    return pd.DataFrame(rows, columns=columns)
