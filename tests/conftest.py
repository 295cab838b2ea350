"""
Pytest configuration and fixtures for ledger tests.

This module provides:
- An in-memory transaction repository with failure and gating hooks
- Auth provider, session tracker, notifier and ledger store fixtures
- In-memory async SQLite fixtures for repository tests
- Factory helpers for drafts and transactions
- A FastAPI test client backed by an in-memory database
"""

import asyncio
import uuid
from datetime import date
from decimal import Decimal
from typing import Optional

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from cashbook.config.settings import Settings, reset_settings
from cashbook.core.timezone import now_utc
from cashbook.domain.models import (
    Transaction,
    TransactionDraft,
    TransactionType,
)
from cashbook.main import create_app
from cashbook.providers import LocalAuthProvider, RecordingNotifier
from cashbook.repositories.sqlalchemy import (
    SqlAlchemyTransactionRepository,
    build_engine,
    build_session_factory,
    drop_db,
    init_db,
)
from cashbook.services import AnalysisService, LedgerStore, SessionTracker

MEMORY_DB_URL = "sqlite+aiosqlite:///:memory:"


# =============================================================================
# IN-MEMORY REPOSITORY
# =============================================================================


class InMemoryTransactionRepository:
    """
    Dict-backed persistence collaborator.

    ``fail_on`` makes the named operation raise; ``gates`` holds an operation
    until the test sets the matching event.
    """

    def __init__(self) -> None:
        self.rows: dict[str, Transaction] = {}
        self.calls: list[tuple[str, tuple]] = []
        self.fail_on: dict[str, Exception] = {}
        self.gates: dict[str, asyncio.Event] = {}
        self.waiting: dict[str, asyncio.Event] = {}
        self._seq = 0

    def gate(self, operation: str) -> asyncio.Event:
        """Block ``operation`` until the returned event is set."""
        self.gates[operation] = asyncio.Event()
        self.waiting[operation] = asyncio.Event()
        return self.gates[operation]

    async def _enter(self, operation: str, *args) -> None:
        self.calls.append((operation, args))
        if operation in self.gates:
            self.waiting[operation].set()
            await self.gates[operation].wait()
        if operation in self.fail_on:
            raise self.fail_on[operation]

    def seed(self, transaction: Transaction) -> Transaction:
        self.rows[transaction.id] = transaction
        return transaction

    def call_count(self, operation: str) -> int:
        return sum(1 for name, _ in self.calls if name == operation)

    async def list_transactions(self, owner_id: str) -> list[Transaction]:
        await self._enter("list", owner_id)
        owned = [t for t in self.rows.values() if t.owner_id == owner_id]
        return sorted(owned, key=lambda t: t.date, reverse=True)

    async def insert_transaction(self, draft: TransactionDraft, owner_id: str) -> Transaction:
        await self._enter("insert", draft, owner_id)
        self._seq += 1
        now = now_utc()
        created = Transaction(
            id=f"srv-{self._seq}",
            type=draft.type,
            amount=draft.amount,
            category=draft.category,
            description=draft.description,
            date=draft.date,
            owner_id=owner_id,
            created_at=now,
            updated_at=now,
        )
        self.rows[created.id] = created
        return created

    async def delete_transaction(self, txn_id: str, owner_id: str) -> None:
        await self._enter("delete", txn_id, owner_id)
        row = self.rows.get(txn_id)
        if row is not None and row.owner_id == owner_id:
            del self.rows[txn_id]


# =============================================================================
# FACTORY HELPERS
# =============================================================================


def make_transaction(
    owner_id: str,
    txn_type: TransactionType,
    amount: str,
    category: str,
    txn_date: Optional[date] = None,
    description: Optional[str] = None,
    txn_id: Optional[str] = None,
) -> Transaction:
    """Build a confirmed transaction as the repository would return it."""
    return Transaction(
        id=txn_id or str(uuid.uuid4()),
        type=txn_type,
        amount=Decimal(amount),
        category=category,
        description=description,
        date=txn_date or date(2024, 6, 15),
        owner_id=owner_id,
        created_at=now_utc(),
        updated_at=now_utc(),
    )


def make_draft(
    txn_type: TransactionType,
    amount: str,
    category: str,
    txn_date: Optional[date] = None,
    description: Optional[str] = None,
) -> TransactionDraft:
    """Build a draft for the add operation."""
    return TransactionDraft(
        type=txn_type,
        amount=Decimal(amount),
        category=category,
        date=txn_date or date(2024, 6, 15),
        description=description,
    )


def sample_collection(owner_id: str) -> list[Transaction]:
    """Salary 1000, food 200, food 50."""
    return [
        make_transaction(owner_id, TransactionType.INCOME, "1000", "salary", date(2024, 6, 1)),
        make_transaction(owner_id, TransactionType.EXPENSE, "200", "food", date(2024, 6, 10)),
        make_transaction(owner_id, TransactionType.EXPENSE, "50", "food", date(2024, 6, 12)),
    ]


async def wait_for(event: asyncio.Event, timeout: float = 1.0) -> None:
    await asyncio.wait_for(event.wait(), timeout)


# =============================================================================
# COLLABORATOR FIXTURES
# =============================================================================


ALICE = "alice@example.com"
BOB = "bob@example.com"


@pytest.fixture
def alice_id() -> str:
    return LocalAuthProvider.user_id_for(ALICE)


@pytest.fixture
def bob_id() -> str:
    return LocalAuthProvider.user_id_for(BOB)


@pytest.fixture
def repo() -> InMemoryTransactionRepository:
    return InMemoryTransactionRepository()


@pytest.fixture
def auth() -> LocalAuthProvider:
    return LocalAuthProvider()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def tracker(auth) -> SessionTracker:
    tracker = SessionTracker(auth)
    yield tracker
    tracker.close()


@pytest.fixture
def store(tracker, repo, notifier) -> LedgerStore:
    """Uninitialized ledger store wired to in-memory collaborators."""
    store = LedgerStore(session_tracker=tracker, transaction_repo=repo, notifier=notifier)
    yield store
    store.dispose()


@pytest_asyncio.fixture
async def signed_in_store(auth, store, repo, alice_id) -> LedgerStore:
    """Store initialized for alice with the sample collection loaded."""
    for txn in sample_collection(alice_id):
        repo.seed(txn)
    await auth.sign_in(ALICE)
    await store.initialize()
    return store


@pytest.fixture
def analysis_service(store) -> AnalysisService:
    return AnalysisService(store, recent_limit=5)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest_asyncio.fixture
async def test_engine():
    """Async engine on a shared in-memory SQLite database."""
    engine = build_engine(MEMORY_DB_URL)
    await init_db(engine)
    yield engine
    await drop_db(engine)
    await engine.dispose()


@pytest.fixture
def sql_repo(test_engine) -> SqlAlchemyTransactionRepository:
    return SqlAlchemyTransactionRepository(build_session_factory(test_engine))


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    reset_settings()
    return Settings(data_dir=tmp_path, database_url=MEMORY_DB_URL, log_level="WARNING")


@pytest.fixture
def client(test_settings) -> TestClient:
    """Provide FastAPI test client with a fresh in-memory database."""
    app = create_app(test_settings)
    with TestClient(app) as c:
        yield c


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def ids(transactions) -> list[str]:
    return [t.id for t in transactions]


def sign_in(client: TestClient, email: str = ALICE) -> dict:
    response = client.post("/auth/sign-in", json={"email": email})
    assert response.status_code == 200
    return response.json()
