"""Tests for domain model construction and validation."""

from datetime import date
from decimal import Decimal

import pytest

from cashbook.core.exceptions import ValidationError
from cashbook.core.timezone import parse_date
from cashbook.domain.models import LedgerEvent, Transaction, TransactionDraft, TransactionType


class TestTransactionDraft:
    """Test draft validation."""

    def test_string_type_and_float_amount_are_coerced(self):
        draft = TransactionDraft(type="Expense", amount=12.3, category=" food ", date=date(2024, 1, 2))

        assert draft.type == TransactionType.EXPENSE
        assert draft.amount == Decimal("12.3")
        assert draft.category == "food"

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError):
            TransactionDraft(type=TransactionType.INCOME, amount=Decimal("-1"), category="x", date=date.today())

    def test_fractional_cents_rejected(self):
        with pytest.raises(ValidationError):
            TransactionDraft(type=TransactionType.EXPENSE, amount=Decimal("0.005"), category="x", date=date.today())

    def test_trailing_zeros_are_whole_cents(self):
        draft = TransactionDraft(type=TransactionType.EXPENSE, amount="1.500", category="x", date=date.today())

        assert draft.amount == Decimal("1.5")

    def test_non_numeric_amount_rejected(self):
        with pytest.raises(ValidationError):
            TransactionDraft(type=TransactionType.INCOME, amount="abc", category="x", date=date.today())

    def test_blank_category_rejected(self):
        with pytest.raises(ValidationError):
            TransactionDraft(type=TransactionType.INCOME, amount=Decimal("1"), category="  ", date=date.today())

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            TransactionDraft(type="transfer", amount=Decimal("1"), category="x", date=date.today())

    def test_string_date_is_parsed(self):
        draft = TransactionDraft(type="income", amount="5", category="gift", date="2024-06-15")

        assert draft.date == date(2024, 6, 15)

    def test_unparseable_date_rejected(self):
        with pytest.raises(ValidationError):
            TransactionDraft(type="income", amount="5", category="gift", date="not a date")

    def test_blank_description_becomes_none(self):
        draft = TransactionDraft(
            type=TransactionType.INCOME, amount=Decimal("1"), category="x", date=date.today(), description="  "
        )

        assert draft.description is None


class TestTransaction:
    """Test confirmed transaction behaviour."""

    def test_signed_amount_follows_type(self):
        income = Transaction(
            id="1", type="income", amount=Decimal("10"), category="salary", date=date(2024, 1, 1), owner_id="u"
        )
        expense = Transaction(
            id="2", type=TransactionType.EXPENSE, amount=Decimal("4"), category="food", date=date(2024, 1, 1), owner_id="u"
        )

        assert income.is_income and income.signed_amount == Decimal("10")
        assert expense.is_expense and expense.signed_amount == Decimal("-4")

    def test_transaction_is_immutable(self):
        txn = Transaction(
            id="1", type="income", amount=Decimal("10"), category="salary", date=date(2024, 1, 1), owner_id="u"
        )

        with pytest.raises(AttributeError):
            txn.amount = Decimal("11")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError):
            Transaction(id="1", type="expense", amount=Decimal("-3"), category="x", date=date(2024, 1, 1), owner_id="u")


class TestHelpers:
    """Test small helpers."""

    @pytest.mark.parametrize(
        "value",
        ["2024-06-15", "Jun 15 2024", date(2024, 6, 15)],
    )
    def test_parse_date(self, value):
        assert parse_date(value) == date(2024, 6, 15)

    def test_failure_events(self):
        assert LedgerEvent.FETCH_FAILED.is_failure
        assert LedgerEvent.NOT_AUTHENTICATED.is_failure
        assert not LedgerEvent.TRANSACTION_ADDED.is_failure
