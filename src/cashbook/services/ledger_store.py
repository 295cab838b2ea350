"""Ledger store: the in-memory transaction set of the signed-in user."""

import asyncio
import logging
from collections.abc import Iterable
from typing import Optional

from cashbook.core.exceptions import (
    AppError,
    AddFailedError,
    DeleteFailedError,
    FetchFailedError,
    NotAuthenticatedError,
)
from cashbook.core.subscription import Subscription
from cashbook.domain.models import Identity, LedgerEvent, Transaction, TransactionDraft
from cashbook.domain.views import LedgerMetrics, LedgerSnapshot
from cashbook.providers.notifier import LoggingNotifier
from cashbook.repositories.protocols import Notifier, TransactionRepository
from cashbook.services.metrics import MetricsCache
from cashbook.services.session_tracker import SessionTracker

logger = logging.getLogger(__name__)


class LedgerStore:
    """
    Owns the authoritative in-memory ledger for the current identity.

    Mutations are applied only after the repository confirms them; failures
    are signaled once to the notifier and leave the collection untouched.

    ``reload``, ``add`` and ``delete`` run one at a time behind a lock.
    Each identity change bumps a generation counter, and a response that
    lands after its generation has passed is dropped, so one user's data
    never reaches another user's ledger.
    """

    def __init__(
        self,
        session_tracker: SessionTracker,
        transaction_repo: TransactionRepository,
        notifier: Optional[Notifier] = None,
    ):
        self._tracker = session_tracker
        self._repo = transaction_repo
        self._notifier = notifier or LoggingNotifier()

        self._identity: Optional[Identity] = None
        self._transactions: tuple[Transaction, ...] = ()
        self._is_loading = True
        self._generation = 0
        self._lock = asyncio.Lock()
        self._metrics_cache = MetricsCache()

        self._subscription: Optional[Subscription] = None
        self._initialized = False
        self._disposed = False

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def identity(self) -> Optional[Identity]:
        return self._identity

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return self._transactions

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    @property
    def metrics(self) -> LedgerMetrics:
        """Aggregates for the current collection (memoized)."""
        return self._metrics_cache.get(self._transactions)

    def snapshot(self) -> LedgerSnapshot:
        """Return the state the view layer renders."""
        metrics = self.metrics
        return LedgerSnapshot(
            transactions=self._transactions,
            total_income=metrics.total_income,
            total_expenses=metrics.total_expenses,
            balance=metrics.balance,
            is_loading=self._is_loading,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def initialize(self) -> None:
        """
        Resolve the current identity, follow identity changes and load.

        ``is_loading`` drops to False once this settles, whether or not the
        initial load succeeded.
        """
        self._ensure_usable()
        if self._initialized:
            raise AppError("Ledger store already initialized")
        self._initialized = True
        self._is_loading = True

        try:
            if not self._tracker.is_started:
                await self._tracker.start()
            self._identity = self._tracker.current_identity
            self._subscription = self._tracker.subscribe(self._on_identity_change)

            if self._identity is not None:
                try:
                    await self.reload()
                except FetchFailedError:
                    logger.info("Initial ledger load failed; starting empty")
        finally:
            self._is_loading = False

    def dispose(self) -> None:
        """Stop following identity changes. The store is unusable afterwards."""
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None
        self._disposed = True

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def reload(self) -> tuple[Transaction, ...]:
        """
        Replace the collection with the repository's copy (newest first).

        Raises:
            FetchFailedError: the repository call failed; the collection is
                left as it was.
        """
        self._ensure_usable()
        async with self._lock:
            identity = self._identity
            generation = self._generation
            if identity is None:
                self._set_transactions(())
                return self._transactions

            try:
                fetched = await self._repo.list_transactions(identity.user_id)
            except Exception as exc:
                if generation != self._generation:
                    logger.info("Ignoring fetch failure for a previous identity: %s", exc)
                    return self._transactions
                logger.error("Failed to fetch transactions for %s: %s", identity.user_id, exc)
                error = FetchFailedError(exc)
                self._notifier.notify(LedgerEvent.FETCH_FAILED, error)
                raise error from exc

            if generation != self._generation:
                logger.info("Discarding ledger fetched for a previous identity")
                return self._transactions

            self._set_transactions(self._owned_unique(fetched, identity))
            logger.debug("Loaded %d transactions", len(self._transactions))
            return self._transactions

    async def add(self, draft: TransactionDraft) -> Transaction:
        """
        Create a transaction and prepend it once the repository confirms it.

        Raises:
            NotAuthenticatedError: nobody is signed in.
            AddFailedError: the repository rejected the draft.
        """
        self._ensure_usable()
        async with self._lock:
            identity = self._require_identity("add")
            generation = self._generation

            try:
                created = await self._repo.insert_transaction(draft, identity.user_id)
            except Exception as exc:
                logger.error("Failed to add transaction: %s", exc)
                error = AddFailedError(exc)
                self._notifier.notify(LedgerEvent.ADD_FAILED, error)
                raise error from exc

            if generation != self._generation:
                logger.info("Identity changed while adding %s; not applying locally", created.id)
                return created

            rest = tuple(t for t in self._transactions if t.id != created.id)
            self._set_transactions((created,) + rest)
            self._notifier.notify(LedgerEvent.TRANSACTION_ADDED)
            logger.debug("Added transaction %s", created.id)
            return created

    async def delete(self, txn_id: str) -> bool:
        """
        Delete a transaction by id.

        Returns True if an entry was removed from the in-memory ledger;
        deleting an id the ledger does not hold succeeds and changes nothing.

        Raises:
            NotAuthenticatedError: nobody is signed in.
            DeleteFailedError: the repository call failed.
        """
        self._ensure_usable()
        async with self._lock:
            identity = self._require_identity("delete")
            generation = self._generation

            try:
                await self._repo.delete_transaction(txn_id, identity.user_id)
            except Exception as exc:
                logger.error("Failed to delete transaction %s: %s", txn_id, exc)
                error = DeleteFailedError(txn_id, exc)
                self._notifier.notify(LedgerEvent.DELETE_FAILED, error)
                raise error from exc

            if generation != self._generation:
                return False

            remaining = tuple(t for t in self._transactions if t.id != txn_id)
            removed = len(remaining) != len(self._transactions)
            if removed:
                self._set_transactions(remaining)
            self._notifier.notify(LedgerEvent.TRANSACTION_DELETED)
            return removed

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _on_identity_change(self, identity: Optional[Identity]) -> None:
        if self._disposed:
            return

        if identity is not None and identity == self._identity:
            # Same user (token refresh, repeated delivery): refresh in place
            await self._reload_quietly()
            return

        self._generation += 1
        self._identity = identity
        self._set_transactions(())
        logger.info("Identity changed (user=%s); ledger cleared", identity.user_id if identity else None)

        if identity is not None:
            await self._reload_quietly()

    async def _reload_quietly(self) -> None:
        try:
            await self.reload()
        except FetchFailedError:
            # Already signaled to the notifier by reload()
            logger.info("Ledger reload after identity change failed")

    def _require_identity(self, operation: str) -> Identity:
        if self._identity is None:
            error = NotAuthenticatedError(operation)
            self._notifier.notify(LedgerEvent.NOT_AUTHENTICATED, error)
            raise error
        return self._identity

    def _ensure_usable(self) -> None:
        if self._disposed:
            raise AppError("Ledger store has been disposed")

    def _set_transactions(self, transactions: tuple[Transaction, ...]) -> None:
        self._transactions = transactions

    @staticmethod
    def _owned_unique(
        transactions: Iterable[Transaction],
        identity: Identity,
    ) -> tuple[Transaction, ...]:
        """Keep fetch order, drop foreign-owned entries and repeated ids."""
        seen: set[str] = set()
        result: list[Transaction] = []
        for t in transactions:
            if t.owner_id != identity.user_id:
                logger.warning("Dropping transaction %s owned by another user", t.id)
                continue
            if t.id in seen:
                continue
            seen.add(t.id)
            result.append(t)
        return tuple(result)
