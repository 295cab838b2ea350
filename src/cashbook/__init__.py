"""Cashbook - personal income/expense ledger with derived metrics."""

__version__ = "0.1.0"
