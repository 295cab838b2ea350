"""View models for service outputs."""

from cashbook.domain.views.ledger import (
    LedgerMetrics,
    LedgerSnapshot,
    CategoryBreakdownItem,
    CategoryBreakdownView,
)

__all__ = [
    "LedgerMetrics",
    "LedgerSnapshot",
    "CategoryBreakdownItem",
    "CategoryBreakdownView",
]
