"""Pydantic schemas for transaction endpoints."""

import datetime as dt
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from cashbook.domain.models.enums import TransactionType


class TransactionCreateRequest(BaseModel):
    """Request schema for creating a transaction."""

    type: TransactionType = Field(..., description="income or expense")
    amount: Decimal = Field(..., ge=0, decimal_places=2, description="Non-negative amount")
    category: str = Field(..., min_length=1, max_length=100, description="Free-form category")
    description: Optional[str] = Field(default=None, max_length=500)
    date: dt.date = Field(..., description="Calendar date the entry is attributed to")

    @field_validator("category")
    @classmethod
    def strip_category(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("category must not be blank")
        return v


class TransactionResponse(BaseModel):
    """Response schema for a single transaction."""

    model_config = {"from_attributes": True}

    id: str
    type: TransactionType
    amount: Decimal
    category: str
    description: Optional[str] = None
    date: dt.date
    owner_id: str
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None


class TransactionListResponse(BaseModel):
    """Response schema for listing transactions."""

    transactions: list[TransactionResponse]
    count: int


class DeleteResponse(BaseModel):
    """Response schema for a delete request."""

    id: str
    removed: bool
