"""Analysis service for dashboard and chart data."""

from collections.abc import Iterable, Sequence
from decimal import Decimal
from typing import Optional

from cashbook.core.exceptions import ValidationError
from cashbook.domain.models import Transaction, TransactionType
from cashbook.domain.views import CategoryBreakdownItem, CategoryBreakdownView
from cashbook.services.ledger_store import LedgerStore
from cashbook.services.metrics import compute_metrics

SORT_KEYS = ("date", "amount")


def category_breakdown(transactions: Iterable[Transaction]) -> CategoryBreakdownView:
    """
    Expenses by category with each category's share of total expenses.

    Percentages are rounded to two places, items sorted by amount descending.
    """
    metrics = compute_metrics(transactions)
    total = metrics.total_expenses

    items: list[CategoryBreakdownItem] = []
    for category, amount in metrics.expenses_by_category.items():
        percentage = Decimal("0")
        if total != Decimal("0"):
            percentage = (amount / total * 100).quantize(Decimal("0.01"))
        items.append(CategoryBreakdownItem(category=category, amount=amount, percentage=percentage))

    items.sort(key=lambda x: x.amount, reverse=True)
    return CategoryBreakdownView(items=items, total_expenses=total)


def income_vs_expenses(transactions: Iterable[Transaction]) -> list[tuple[str, Decimal]]:
    """Two-bar comparison series: income first, then expenses."""
    metrics = compute_metrics(transactions)
    return [("Income", metrics.total_income), ("Expenses", metrics.total_expenses)]


def recent_transactions(transactions: Sequence[Transaction], limit: int = 5) -> list[Transaction]:
    """Return the first ``limit`` entries in ledger order."""
    if limit < 0:
        raise ValidationError("limit must be >= 0")
    return list(transactions[:limit])


def filter_transactions(
    transactions: Iterable[Transaction],
    txn_type: Optional[TransactionType] = None,
    category: Optional[str] = None,
) -> list[Transaction]:
    """Filter by type and/or category (case-insensitive); None means any."""
    result = list(transactions)
    if txn_type is not None:
        result = [t for t in result if t.type == txn_type]
    if category:
        wanted = category.strip().lower()
        result = [t for t in result if t.category.lower() == wanted]
    return result


def sort_transactions(transactions: Iterable[Transaction], by: str = "date") -> list[Transaction]:
    """Return a new list sorted descending by date or amount."""
    if by not in SORT_KEYS:
        raise ValidationError(f"Unsupported sort key: {by!r}")
    if by == "amount":
        return sorted(transactions, key=lambda t: t.amount, reverse=True)
    return sorted(transactions, key=lambda t: t.date, reverse=True)


class AnalysisService:
    """
    Read-side helpers over a ledger store.

    Nothing here mutates the store; filtered or sorted results are new lists.
    """

    def __init__(self, ledger_store: LedgerStore, recent_limit: int = 5):
        self._store = ledger_store
        self._recent_limit = recent_limit

    def category_breakdown(self) -> CategoryBreakdownView:
        return category_breakdown(self._store.transactions)

    def income_vs_expenses(self) -> list[tuple[str, Decimal]]:
        return income_vs_expenses(self._store.transactions)

    def recent(self, limit: Optional[int] = None) -> list[Transaction]:
        """Most recent entries for the dashboard."""
        return recent_transactions(
            self._store.transactions,
            self._recent_limit if limit is None else limit,
        )

    def list_transactions(
        self,
        txn_type: Optional[TransactionType] = None,
        category: Optional[str] = None,
        sort_by: Optional[str] = None,
    ) -> list[Transaction]:
        """Ledger entries filtered and optionally re-sorted for display."""
        result = filter_transactions(self._store.transactions, txn_type=txn_type, category=category)
        if sort_by:
            result = sort_transactions(result, by=sort_by)
        return result
