"""
Test Suite for the Family LLC Tracker

Test Structure:
- fixtures/: Shared test data and builders
- unit/: Unit tests mirroring src/ package structure
- integration/: End-to-end workflow tests

Test Categories:
- Core utilities (currency, money, dates, config)
- Ledger collections
- Mortgage schedule import, reconciliation and summaries
- CLI commands

Test Data:
All test data uses synthetic ledger and lender information.
"""
