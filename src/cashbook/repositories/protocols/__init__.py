"""Collaborator protocol definitions (interfaces)."""

from cashbook.repositories.protocols.transaction_repo import TransactionRepository
from cashbook.repositories.protocols.auth_provider import AuthProvider, AuthStateHandler
from cashbook.repositories.protocols.notifier import Notifier

__all__ = [
    "TransactionRepository",
    "AuthProvider",
    "AuthStateHandler",
    "Notifier",
]
