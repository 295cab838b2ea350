"""Domain layer - pure business models with no I/O."""

from cashbook.domain.models import (
    TransactionType,
    AuthEvent,
    LedgerEvent,
    Identity,
    AuthSession,
    Transaction,
    TransactionDraft,
)

__all__ = [
    "TransactionType",
    "AuthEvent",
    "LedgerEvent",
    "Identity",
    "AuthSession",
    "Transaction",
    "TransactionDraft",
]
