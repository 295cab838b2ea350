"""Transaction repository protocol."""

from typing import Protocol

from cashbook.domain.models import Transaction, TransactionDraft


class TransactionRepository(Protocol):
    """Interface for the persistence collaborator that stores ledger entries."""

    async def list_transactions(self, owner_id: str) -> list[Transaction]:
        """List all transactions owned by ``owner_id``, newest date first."""
        ...

    async def insert_transaction(self, draft: TransactionDraft, owner_id: str) -> Transaction:
        """Persist a draft and return the created record with server-assigned fields."""
        ...

    async def delete_transaction(self, txn_id: str, owner_id: str) -> None:
        """
        Delete ``owner_id``'s transaction ``txn_id``.

        Deleting an absent id, or one owned by someone else, succeeds and
        changes nothing.
        """
        ...
