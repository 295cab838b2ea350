"""Pydantic schemas for ledger, auth and analytics endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from cashbook.api.schemas.transaction import TransactionResponse


class SignInRequest(BaseModel):
    """Request schema for a local sign-in."""

    email: str = Field(..., min_length=3, max_length=255)


class SessionResponse(BaseModel):
    """The current identity, if any."""

    signed_in: bool
    user_id: Optional[str] = None
    email: Optional[str] = None
    expires_at: Optional[datetime] = None


class LedgerResponse(BaseModel):
    """Everything the view layer renders for the ledger."""

    transactions: list[TransactionResponse]
    total_income: Decimal
    total_expenses: Decimal
    balance: Decimal
    is_loading: bool
    expenses_by_category: dict[str, Decimal]


class CategoryBreakdownItemResponse(BaseModel):
    category: str
    amount: Decimal
    percentage: Decimal


class CategoryBreakdownResponse(BaseModel):
    """Expenses by category, largest first."""

    items: list[CategoryBreakdownItemResponse]
    total_expenses: Decimal


class ComparisonBarResponse(BaseModel):
    name: str
    amount: Decimal


class IncomeVsExpensesResponse(BaseModel):
    bars: list[ComparisonBarResponse]


class NoticeResponse(BaseModel):
    """A ledger event awaiting display."""

    event: str
    is_failure: bool
    message: Optional[str] = None


class NoticeListResponse(BaseModel):
    notices: list[NoticeResponse]
