"""
Test Fixtures and Utilities

Shared test data and builders for mortgage and ledger tests.

This module provides:
- A sample lender amortization CSV export
- Builders for schedule installments and ledger transactions

All test data is synthetic.
"""
