"""Domain models package."""

from cashbook.domain.models.enums import TransactionType, AuthEvent, LedgerEvent
from cashbook.domain.models.identity import Identity, AuthSession
from cashbook.domain.models.transaction import Transaction, TransactionDraft

__all__ = [
    "TransactionType",
    "AuthEvent",
    "LedgerEvent",
    "Identity",
    "AuthSession",
    "Transaction",
    "TransactionDraft",
]
