#!/usr/bin/env python3
"""
Main CLI Entry Point for the Family LLC Tracker

Provides the unified command-line interface.
"""

import logging
import os

import click

from ..core.config import get_config


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    Family LLC Tracker - Rental Property LLC Bookkeeping

    Reconciles lender amortization schedules against the LLC's
    transaction ledger and reports mortgage payment progress.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["LLC_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("llc_tracker").setLevel(logging.DEBUG)

    ctx.obj["config"] = get_config()

    if verbose:
        click.echo(f"Environment: {ctx.obj['config'].environment.value}")
        click.echo(f"Data directory: {ctx.obj['config'].data_dir}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    from llc_tracker import __author__, __version__

    click.echo(f"Family LLC Tracker v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  Ledger Directory: {config_obj.ledger.ledger_dir}")
    click.echo(f"  Output Directory: {config_obj.output_dir}")
    click.echo(f"  Match Window: {config_obj.reconciliation.match_window_days} days")
    click.echo(f"  Variance Tolerance: ${config_obj.reconciliation.variance_tolerance}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


from .mortgage import mortgage  # noqa: E402

main.add_command(mortgage)


if __name__ == "__main__":
    main()
