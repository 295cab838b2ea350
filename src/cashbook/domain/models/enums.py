"""Enumerations for domain models."""

from enum import Enum


class TransactionType(str, Enum):
    """Direction of a ledger entry."""

    INCOME = "income"
    EXPENSE = "expense"


class AuthEvent(str, Enum):
    """Session transitions reported by the auth provider."""

    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"
    TOKEN_REFRESHED = "TOKEN_REFRESHED"


class LedgerEvent(str, Enum):
    """Named events the ledger store signals to the notifier."""

    FETCH_FAILED = "FETCH_FAILED"
    ADD_FAILED = "ADD_FAILED"
    DELETE_FAILED = "DELETE_FAILED"
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
    TRANSACTION_ADDED = "TRANSACTION_ADDED"
    TRANSACTION_DELETED = "TRANSACTION_DELETED"

    @property
    def is_failure(self) -> bool:
        """Return True for events that report a failed operation."""
        return self not in (LedgerEvent.TRANSACTION_ADDED, LedgerEvent.TRANSACTION_DELETED)
