"""
Unit tests for the metrics functions.

Tests cover:
- Totals and balance for the reference collection
- Category grouping without phantom entries
- Exact decimal accumulation
- Memoization keyed on collection identity
"""

from decimal import Decimal

import pytest

from cashbook.domain.models import TransactionType
from cashbook.services.metrics import (
    MetricsCache,
    balance,
    compute_metrics,
    expenses_by_category,
    total_expenses,
    total_income,
)

from tests.conftest import make_transaction, sample_collection

OWNER = "owner-1"


class TestTotals:
    """Tests for income, expense and balance totals."""

    def test_reference_collection(self):
        """
        GIVEN salary 1000, food 200, food 50
        WHEN metrics are computed
        THEN income=1000, expenses=250, balance=750, food=250
        """
        txns = sample_collection(OWNER)

        metrics = compute_metrics(txns)

        assert metrics.total_income == Decimal("1000")
        assert metrics.total_expenses == Decimal("250")
        assert metrics.balance == Decimal("750")
        assert metrics.expenses_by_category == {"food": Decimal("250")}

    def test_standalone_functions_match_compute_metrics(self):
        txns = sample_collection(OWNER)

        metrics = compute_metrics(txns)

        assert total_income(txns) == metrics.total_income
        assert total_expenses(txns) == metrics.total_expenses
        assert balance(txns) == metrics.balance
        assert expenses_by_category(txns) == metrics.expenses_by_category

    def test_empty_collection_is_all_zero(self):
        metrics = compute_metrics([])

        assert metrics.total_income == Decimal("0")
        assert metrics.total_expenses == Decimal("0")
        assert metrics.balance == Decimal("0")
        assert metrics.expenses_by_category == {}

    def test_balance_can_be_negative(self):
        txns = [
            make_transaction(OWNER, TransactionType.INCOME, "100", "salary"),
            make_transaction(OWNER, TransactionType.EXPENSE, "150.25", "rent"),
        ]

        assert balance(txns) == Decimal("-50.25")

    def test_balance_accepts_generator(self):
        txns = sample_collection(OWNER)

        assert balance(t for t in txns) == Decimal("750")

    def test_sums_are_exact_decimals(self):
        """0.1 + 0.2 must be exactly 0.3, with no float drift."""
        txns = [
            make_transaction(OWNER, TransactionType.EXPENSE, "0.1", "snacks"),
            make_transaction(OWNER, TransactionType.EXPENSE, "0.2", "snacks"),
        ]

        assert total_expenses(txns) == Decimal("0.3")
        assert expenses_by_category(txns)["snacks"] == Decimal("0.3")

    def test_zero_amount_expense_still_creates_category(self):
        txns = [make_transaction(OWNER, TransactionType.EXPENSE, "0", "gifts")]

        assert expenses_by_category(txns) == {"gifts": Decimal("0")}


class TestExpensesByCategory:
    """Tests for per-category grouping."""

    def test_income_categories_are_absent(self):
        txns = [
            make_transaction(OWNER, TransactionType.INCOME, "500", "freelance"),
            make_transaction(OWNER, TransactionType.EXPENSE, "30", "transport"),
        ]

        result = expenses_by_category(txns)

        assert "freelance" not in result
        assert result == {"transport": Decimal("30")}

    def test_every_category_is_backed_by_an_expense(self):
        txns = sample_collection(OWNER) + [
            make_transaction(OWNER, TransactionType.INCOME, "20", "refund"),
            make_transaction(OWNER, TransactionType.EXPENSE, "12.50", "coffee"),
        ]

        result = expenses_by_category(txns)

        for category, amount in result.items():
            backing = [t for t in txns if t.is_expense and t.category == category]
            assert backing
            assert sum((t.amount for t in backing), Decimal("0")) == amount

    def test_categories_are_case_sensitive_labels(self):
        txns = [
            make_transaction(OWNER, TransactionType.EXPENSE, "1", "Food"),
            make_transaction(OWNER, TransactionType.EXPENSE, "2", "food"),
        ]

        assert expenses_by_category(txns) == {"Food": Decimal("1"), "food": Decimal("2")}


class TestMetricsCache:
    """Tests for identity-keyed memoization."""

    def test_same_collection_object_reuses_result(self):
        cache = MetricsCache()
        txns = tuple(sample_collection(OWNER))

        first = cache.get(txns)
        second = cache.get(txns)

        assert first is second

    def test_cached_category_totals_are_read_only(self):
        """
        GIVEN cached metrics for a collection
        WHEN a reader tries to edit the per-category totals
        THEN the edit is refused and later readers see the original totals
        """
        cache = MetricsCache()
        txns = tuple(sample_collection(OWNER))
        by_category = cache.get(txns).expenses_by_category

        with pytest.raises(TypeError):
            by_category["food"] = Decimal("0")

        assert cache.get(txns).expenses_by_category == {"food": Decimal("250")}

    def test_new_collection_object_recomputes(self):
        cache = MetricsCache()
        txns = tuple(sample_collection(OWNER))

        first = cache.get(txns)
        second = cache.get(tuple(list(txns)))

        assert first is not second
        assert first == second

    def test_clear_forces_recompute(self):
        cache = MetricsCache()
        txns = tuple(sample_collection(OWNER))
        first = cache.get(txns)

        cache.clear()

        assert cache.get(txns) is not first

    @pytest.mark.parametrize("size", [0, 1, 7])
    def test_balance_identity_holds(self, size):
        txns = tuple(
            make_transaction(
                OWNER,
                TransactionType.INCOME if i % 2 else TransactionType.EXPENSE,
                f"{i}.{i}",
                f"cat-{i % 3}",
            )
            for i in range(size)
        )

        metrics = MetricsCache().get(txns)

        assert metrics.balance == metrics.total_income - metrics.total_expenses
