#!/usr/bin/env python3
"""
Mortgage CLI - Schedule Import and Payment Reconciliation

Command-line interface for importing lender amortization schedules and
reviewing them against the transaction ledger.
"""

from datetime import datetime
from pathlib import Path

import click

from ..core.config import get_config
from ..core.dates import FinancialDate
from ..core.json_utils import format_json
from ..core.money import Money
from ..ledger.models import Mortgage
from ..ledger.store import LedgerStore
from ..mortgage.models import ReconciledInstallment
from ..mortgage.reconciler import ScheduleReconciler
from ..mortgage.schedule_import import ScheduleImportError, import_schedule, schedule_to_dataframe
from ..mortgage.summary import MortgageSummary

STATUS_LABELS = {
    "paid": "Paid",
    "variance": "Variance",
    "missed": "Missed",
    "pending": "Pending",
}


def _parse_as_of(as_of: str | None) -> FinancialDate | None:
    if not as_of:
        return None
    try:
        return FinancialDate(date=datetime.strptime(as_of, "%Y-%m-%d").date())
    except ValueError:
        raise click.ClickException(f"Invalid date format: {as_of}. Use YYYY-MM-DD")


def _resolve_mortgage(store: LedgerStore, mortgage_id: str | None) -> Mortgage:
    if mortgage_id:
        try:
            return store.get_mortgage(mortgage_id)
        except KeyError:
            raise click.ClickException(f"Mortgage not found: {mortgage_id}")

    primary = store.primary_mortgage()
    if primary is None:
        raise click.ClickException("No mortgage found. Add a mortgage to the ledger first.")
    return primary


def _reconcile(store: LedgerStore, mortgage: Mortgage, as_of: FinancialDate | None) -> list[ReconciledInstallment]:
    policy = get_config().reconciliation
    reconciler = ScheduleReconciler(
        match_window_days=policy.match_window_days,
        variance_tolerance=Money(policy.variance_tolerance),
    )
    return reconciler.reconcile(
        store.load_schedule(mortgage.id),
        store.load_transactions(),
        mortgage.start_date,
        as_of=as_of,
    )


@click.group()
@click.option("--ledger-dir", type=click.Path(file_okay=False), help="Override ledger directory")
@click.pass_context
def mortgage(ctx: click.Context, ledger_dir: str | None) -> None:
    """Mortgage schedule and payment reconciliation commands."""
    ctx.ensure_object(dict)
    ctx.obj["store"] = LedgerStore(ledger_dir) if ledger_dir else LedgerStore()


@mortgage.command(name="list")
@click.pass_context
def list_mortgages(ctx: click.Context) -> None:
    """
    List mortgages in the ledger, primary mortgage first.

    Example:
      llc-tracker mortgage list
    """
    store: LedgerStore = ctx.obj["store"]
    mortgages = store.load_mortgages()

    if not mortgages:
        click.echo("No mortgages found.")
        return

    for i, m in enumerate(mortgages):
        marker = " (primary)" if i == 0 else ""
        click.echo(f"{m.id}{marker}")
        click.echo(f"  Property: {m.property_address}")
        click.echo(f"  Lender: {m.lender_name}")
        click.echo(f"  Loan Amount: {m.loan_amount}")
        click.echo(f"  Rate/Term: {m.interest_rate}% / {m.term_years} years")
        click.echo(f"  Start Date: {m.start_date}")


@mortgage.command(name="import-schedule")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--mortgage-id", help="Mortgage to import into (default: primary mortgage)")
@click.pass_context
def import_schedule_cmd(ctx: click.Context, csv_file: str, mortgage_id: str | None) -> None:
    """
    Replace a mortgage's amortization schedule with a lender CSV export.

    Examples:
      llc-tracker mortgage import-schedule schedule.csv
      llc-tracker mortgage import-schedule schedule.csv --mortgage-id 1700000000-abc
    """
    store: LedgerStore = ctx.obj["store"]
    target = _resolve_mortgage(store, mortgage_id)

    try:
        installments = import_schedule(store, target.id, Path(csv_file))
    except ScheduleImportError as e:
        raise click.ClickException(f"Import failed: {e}")

    click.echo(f"Imported {len(installments)} payments for {target.property_address or target.id}")


@mortgage.command()
@click.option("--mortgage-id", help="Mortgage to show (default: primary mortgage)")
@click.option("--as-of", help="Date deciding missed vs pending (YYYY-MM-DD, default: today)")
@click.option("--format", "output_format", type=click.Choice(["table", "json"]), default="table")
@click.pass_context
def schedule(ctx: click.Context, mortgage_id: str | None, as_of: str | None, output_format: str) -> None:
    """
    Show the amortization schedule matched against logged payments.

    Examples:
      llc-tracker mortgage schedule
      llc-tracker mortgage schedule --as-of 2024-06-30 --format json
    """
    store: LedgerStore = ctx.obj["store"]
    target = _resolve_mortgage(store, mortgage_id)
    reconciled = _reconcile(store, target, _parse_as_of(as_of))

    if output_format == "json":
        click.echo(format_json([r.to_dict() for r in reconciled]))
        return

    if not reconciled:
        click.echo("No schedule imported for this mortgage.")
        return

    df = schedule_to_dataframe(reconciled)
    df["status"] = df["status"].map(STATUS_LABELS)
    click.echo(df.to_string(index=False))


@mortgage.command()
@click.option("--mortgage-id", help="Mortgage to summarize (default: primary mortgage)")
@click.option("--as-of", help="Date deciding missed vs pending (YYYY-MM-DD, default: today)")
@click.option("--format", "output_format", type=click.Choice(["table", "json"]), default="table")
@click.pass_context
def summary(ctx: click.Context, mortgage_id: str | None, as_of: str | None, output_format: str) -> None:
    """
    Show payment progress, current balance and the next payment due.

    Example:
      llc-tracker mortgage summary
    """
    store: LedgerStore = ctx.obj["store"]
    target = _resolve_mortgage(store, mortgage_id)
    reconciled = _reconcile(store, target, _parse_as_of(as_of))
    result = MortgageSummary.from_schedule(reconciled, target.loan_amount)

    if output_format == "json":
        click.echo(format_json(result.to_dict()))
        return

    click.echo(f"Mortgage Snapshot: {target.property_address}")
    click.echo("=" * 60)
    click.echo(
        f"Payments Made: {result.payments_made} / {result.total_payments} ({result.progress_percent:.1f}%)"
    )
    click.echo(f"Current Balance: {result.current_balance}")
    click.echo(f"Total Paid: {result.total_paid}")
    click.echo(f"Total Interest Paid: {result.total_interest_paid}")

    if result.last_paid:
        click.echo(
            f"Last Paid: #{result.last_paid.payment_number} on {result.last_paid.paid_date} "
            f"({result.last_paid.actual_payment})"
        )
    else:
        click.echo("Last Paid: none")

    if result.next_pending:
        click.echo(
            f"Next Due: #{result.next_pending.payment_number} on {result.next_pending.due_date} "
            f"({result.next_pending.scheduled_payment})"
        )
    else:
        click.echo("Next Due: none")

    counts = ", ".join(f"{STATUS_LABELS[k]}: {v}" for k, v in result.status_counts.items())
    click.echo(f"Status: {counts}")
