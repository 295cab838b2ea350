"""Service layer - ledger state, session tracking and derived metrics."""

from cashbook.services.session_tracker import SessionTracker
from cashbook.services.ledger_store import LedgerStore
from cashbook.services.metrics import (
    MetricsCache,
    compute_metrics,
    total_income,
    total_expenses,
    balance,
    expenses_by_category,
)
from cashbook.services.analysis_service import AnalysisService

__all__ = [
    "SessionTracker",
    "LedgerStore",
    "MetricsCache",
    "compute_metrics",
    "total_income",
    "total_expenses",
    "balance",
    "expenses_by_category",
    "AnalysisService",
]
