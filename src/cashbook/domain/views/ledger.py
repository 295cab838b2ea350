"""View models for ledger and analytics outputs."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType

from cashbook.domain.models import Transaction


@dataclass(frozen=True)
class LedgerMetrics:
    """
    Aggregates derived from one collection of transactions.

    ``expenses_by_category`` is a read-only copy; cached instances are
    shared between readers.
    """

    total_income: Decimal = field(default_factory=lambda: Decimal("0"))
    total_expenses: Decimal = field(default_factory=lambda: Decimal("0"))
    balance: Decimal = field(default_factory=lambda: Decimal("0"))
    expenses_by_category: Mapping[str, Decimal] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "expenses_by_category", MappingProxyType(dict(self.expenses_by_category))
        )


@dataclass(frozen=True)
class LedgerSnapshot:
    """Everything the view layer is allowed to read from the ledger store."""

    transactions: tuple[Transaction, ...]
    total_income: Decimal
    total_expenses: Decimal
    balance: Decimal
    is_loading: bool


@dataclass
class CategoryBreakdownItem:
    """Single slice of the expenses-by-category breakdown."""

    category: str
    amount: Decimal
    percentage: Decimal


@dataclass
class CategoryBreakdownView:
    """Expenses grouped by category, largest first."""

    items: list[CategoryBreakdownItem] = field(default_factory=list)
    total_expenses: Decimal = field(default_factory=lambda: Decimal("0"))
