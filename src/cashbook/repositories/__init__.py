"""Repository layer - collaborator abstractions and implementations."""

from cashbook.repositories.protocols import (
    TransactionRepository,
    AuthProvider,
    AuthStateHandler,
    Notifier,
)

__all__ = [
    "TransactionRepository",
    "AuthProvider",
    "AuthStateHandler",
    "Notifier",
]
