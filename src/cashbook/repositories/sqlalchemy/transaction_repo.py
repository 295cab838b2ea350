"""SQLAlchemy implementation of TransactionRepository."""

import uuid
from decimal import Decimal

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from cashbook.core.timezone import now_utc, to_utc
from cashbook.domain.models import Transaction, TransactionDraft
from cashbook.repositories.sqlalchemy.orm_models import TransactionORM


class SqlAlchemyTransactionRepository:
    """SQLAlchemy-backed transaction repository (one session per call)."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def list_transactions(self, owner_id: str) -> list[Transaction]:
        """List all transactions for an owner, ordered by date descending."""
        query = (
            select(TransactionORM)
            .where(TransactionORM.owner_id == owner_id)
            .order_by(TransactionORM.date.desc(), TransactionORM.created_at.desc())
        )
        async with self._session_factory() as db:
            result = await db.execute(query)
            return [self._to_domain(t) for t in result.scalars().all()]

    async def insert_transaction(self, draft: TransactionDraft, owner_id: str) -> Transaction:
        """Persist a draft; id and timestamps are assigned here."""
        now = now_utc()
        orm_txn = TransactionORM(
            id=str(uuid.uuid4()),
            owner_id=owner_id,
            type=draft.type,
            amount=draft.amount,
            category=draft.category,
            description=draft.description,
            date=draft.date,
            created_at=now,
            updated_at=now,
        )
        async with self._session_factory() as db:
            db.add(orm_txn)
            await db.commit()
            await db.refresh(orm_txn)
            return self._to_domain(orm_txn)

    async def delete_transaction(self, txn_id: str, owner_id: str) -> None:
        """Delete an owner's transaction; unknown or foreign ids are not an error."""
        query = delete(TransactionORM).where(
            TransactionORM.id == txn_id,
            TransactionORM.owner_id == owner_id,
        )
        async with self._session_factory() as db:
            await db.execute(query)
            await db.commit()

    @staticmethod
    def _to_domain(orm: TransactionORM) -> Transaction:
        """Convert ORM model to domain model."""
        return Transaction(
            id=orm.id,
            type=orm.type,
            amount=Decimal(str(orm.amount)) if orm.amount is not None else Decimal("0"),
            category=orm.category,
            description=orm.description,
            date=orm.date,
            owner_id=orm.owner_id,
            # SQLite drops tzinfo on the way back
            created_at=to_utc(orm.created_at) if orm.created_at else None,
            updated_at=to_utc(orm.updated_at) if orm.updated_at else None,
        )
