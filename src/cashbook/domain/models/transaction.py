"""Transaction and TransactionDraft domain models."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Optional

from cashbook.core.exceptions import ValidationError
from cashbook.core.timezone import parse_date
from cashbook.domain.models.enums import TransactionType

CENT = Decimal("0.01")


def _coerce_amount(value, whole_cents: bool = False) -> Decimal:
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            # str() first so floats keep their printed value, not binary noise
            amount = Decimal(str(value))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid amount: {value!r}") from exc
    if not amount.is_finite():
        raise ValidationError(f"Invalid amount: {value!r}")
    if amount < 0:
        raise ValidationError("Amount cannot be negative")
    if whole_cents:
        try:
            in_cents = amount.quantize(CENT)
        except InvalidOperation as exc:
            raise ValidationError(f"Amount is too large: {value!r}") from exc
        if in_cents != amount:
            raise ValidationError(f"Amount has more than 2 decimal places: {value!r}")
    return amount


@dataclass(frozen=True)
class Transaction:
    """
    Ledger entry as confirmed by the persistence service.

    - ``id``, ``owner_id`` and the timestamps are server-assigned
    - ``amount`` is a non-negative magnitude; ``type`` decides its sign
    - instances are never mutated; there is no update operation
    """

    id: str
    type: TransactionType
    amount: Decimal
    category: str
    date: date
    owner_id: str
    description: Optional[str] = None
    created_at: Optional[datetime] = field(default=None, compare=False)
    updated_at: Optional[datetime] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.type, str) and not isinstance(self.type, TransactionType):
            object.__setattr__(self, "type", TransactionType(self.type))
        object.__setattr__(self, "amount", _coerce_amount(self.amount))

    @property
    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE

    @property
    def signed_amount(self) -> Decimal:
        """Contribution of this entry to the balance."""
        return self.amount if self.is_income else -self.amount


@dataclass
class TransactionDraft:
    """Input data for creating a transaction (no id, no owner)."""

    type: TransactionType
    amount: Decimal
    category: str
    date: date
    description: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.type, str) and not isinstance(self.type, TransactionType):
            try:
                self.type = TransactionType(self.type.lower())
            except ValueError as exc:
                raise ValidationError(f"Unknown transaction type: {self.type!r}") from exc
        self.amount = _coerce_amount(self.amount, whole_cents=True)
        try:
            self.date = parse_date(self.date)
        except (ValueError, OverflowError, TypeError) as exc:
            raise ValidationError(f"Invalid date: {self.date!r}") from exc
        self.category = (self.category or "").strip()
        if not self.category:
            raise ValidationError("Category is required")
        if self.description is not None:
            self.description = self.description.strip() or None
