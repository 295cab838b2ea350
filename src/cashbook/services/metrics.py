"""
Derived ledger metrics.

Every function here is pure: it reads an iterable of transactions and
returns a value, with no state and no I/O. Sums start from Decimal("0")
so totals carry exactly the precision of the stored amounts.
"""

from collections.abc import Iterable, Sequence
from decimal import Decimal
from typing import Optional

from cashbook.domain.models import Transaction, TransactionType
from cashbook.domain.views import LedgerMetrics

ZERO = Decimal("0")


def _sum_of(transactions: Iterable[Transaction], txn_type: TransactionType) -> Decimal:
    return sum((t.amount for t in transactions if t.type == txn_type), ZERO)


def total_income(transactions: Iterable[Transaction]) -> Decimal:
    """Sum of amounts of all income entries."""
    return _sum_of(transactions, TransactionType.INCOME)


def total_expenses(transactions: Iterable[Transaction]) -> Decimal:
    """Sum of amounts of all expense entries."""
    return _sum_of(transactions, TransactionType.EXPENSE)


def balance(transactions: Iterable[Transaction]) -> Decimal:
    """Income minus expenses."""
    transactions = list(transactions)
    return total_income(transactions) - total_expenses(transactions)


def expenses_by_category(transactions: Iterable[Transaction]) -> dict[str, Decimal]:
    """
    Group expenses by category and sum each group.

    Only categories with at least one expense entry appear; insertion order
    follows the first occurrence in ``transactions``.
    """
    totals: dict[str, Decimal] = {}
    for t in transactions:
        if t.type == TransactionType.EXPENSE:
            totals[t.category] = totals.get(t.category, ZERO) + t.amount
    return totals


def compute_metrics(transactions: Iterable[Transaction]) -> LedgerMetrics:
    """Compute all aggregates in a single pass."""
    income = ZERO
    expenses = ZERO
    by_category: dict[str, Decimal] = {}

    for t in transactions:
        if t.type == TransactionType.INCOME:
            income += t.amount
        elif t.type == TransactionType.EXPENSE:
            expenses += t.amount
            by_category[t.category] = by_category.get(t.category, ZERO) + t.amount

    return LedgerMetrics(
        total_income=income,
        total_expenses=expenses,
        balance=income - expenses,
        expenses_by_category=by_category,
    )


class MetricsCache:
    """
    Memoizes ``compute_metrics`` on the identity of the collection object.

    The ledger store replaces its collection tuple on every mutation, so an
    unchanged object means unchanged metrics.
    """

    def __init__(self) -> None:
        self._source: Optional[Sequence[Transaction]] = None
        self._metrics: Optional[LedgerMetrics] = None

    def get(self, transactions: Sequence[Transaction]) -> LedgerMetrics:
        if self._metrics is None or transactions is not self._source:
            self._metrics = compute_metrics(transactions)
            self._source = transactions
        return self._metrics

    def clear(self) -> None:
        self._source = None
        self._metrics = None
