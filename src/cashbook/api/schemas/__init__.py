"""Pydantic schemas for API request/response."""

from cashbook.api.schemas.transaction import (
    TransactionCreateRequest,
    TransactionResponse,
    TransactionListResponse,
    DeleteResponse,
)
from cashbook.api.schemas.ledger import (
    SignInRequest,
    SessionResponse,
    LedgerResponse,
    CategoryBreakdownItemResponse,
    CategoryBreakdownResponse,
    ComparisonBarResponse,
    IncomeVsExpensesResponse,
    NoticeResponse,
    NoticeListResponse,
)

__all__ = [
    "TransactionCreateRequest",
    "TransactionResponse",
    "TransactionListResponse",
    "DeleteResponse",
    "SignInRequest",
    "SessionResponse",
    "LedgerResponse",
    "CategoryBreakdownItemResponse",
    "CategoryBreakdownResponse",
    "ComparisonBarResponse",
    "IncomeVsExpensesResponse",
    "NoticeResponse",
    "NoticeListResponse",
]
