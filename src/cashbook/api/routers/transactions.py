"""Transaction endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from cashbook.api.deps import get_analysis_service, get_ledger_store
from cashbook.api.schemas import (
    DeleteResponse,
    TransactionCreateRequest,
    TransactionListResponse,
    TransactionResponse,
)
from cashbook.domain.models import TransactionDraft, TransactionType
from cashbook.services import AnalysisService, LedgerStore

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("", response_model=TransactionListResponse)
async def list_transactions(
    type: Optional[TransactionType] = Query(None, description="income or expense"),
    category: Optional[str] = Query(None),
    sort: Optional[str] = Query(None, pattern="^(date|amount)$"),
    analysis: AnalysisService = Depends(get_analysis_service),
) -> TransactionListResponse:
    """List ledger entries, optionally filtered and re-sorted for display."""
    rows = analysis.list_transactions(txn_type=type, category=category, sort_by=sort)
    return TransactionListResponse(
        transactions=[TransactionResponse.model_validate(t) for t in rows],
        count=len(rows),
    )


@router.post("", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
async def add_transaction(
    request: TransactionCreateRequest,
    store: LedgerStore = Depends(get_ledger_store),
) -> TransactionResponse:
    """Add an income or expense entry for the signed-in user."""
    draft = TransactionDraft(
        type=request.type,
        amount=request.amount,
        category=request.category,
        description=request.description,
        date=request.date,
    )
    created = await store.add(draft)
    return TransactionResponse.model_validate(created)


@router.delete("/{txn_id}", response_model=DeleteResponse)
async def delete_transaction(
    txn_id: str,
    store: LedgerStore = Depends(get_ledger_store),
) -> DeleteResponse:
    """Delete an entry; unknown ids succeed without changing the ledger."""
    removed = await store.delete(txn_id)
    return DeleteResponse(id=txn_id, removed=removed)
