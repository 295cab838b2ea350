"""SQLAlchemy ORM model definitions."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    Enum as SqlEnum,
    Index,
    Numeric,
    String,
    Text,
)

from cashbook.core.timezone import now_utc
from cashbook.domain.models.enums import TransactionType
from cashbook.repositories.sqlalchemy.database import Base


class TransactionORM(Base):
    """SQLAlchemy model for a ledger entry."""

    __tablename__ = "transactions"
    __table_args__ = (Index("ix_transactions_owner_date", "owner_id", "date"),)

    id = Column(String(36), primary_key=True)
    owner_id = Column(String(36), nullable=False)
    type = Column(
        SqlEnum(TransactionType, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    amount = Column(Numeric(precision=14, scale=2), nullable=False, default=Decimal("0"))
    category = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    date = Column(Date, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=now_utc, onupdate=now_utc)
