"""Ledger snapshot and notification endpoints."""

from fastapi import APIRouter, Depends

from cashbook.api.deps import get_ledger_store, get_notifier
from cashbook.api.schemas import (
    LedgerResponse,
    NoticeListResponse,
    NoticeResponse,
    TransactionResponse,
)
from cashbook.providers import RecordingNotifier
from cashbook.services import LedgerStore

router = APIRouter(tags=["ledger"])


def _ledger_response(store: LedgerStore) -> LedgerResponse:
    snapshot = store.snapshot()
    return LedgerResponse(
        transactions=[TransactionResponse.model_validate(t) for t in snapshot.transactions],
        total_income=snapshot.total_income,
        total_expenses=snapshot.total_expenses,
        balance=snapshot.balance,
        is_loading=snapshot.is_loading,
        expenses_by_category=dict(store.metrics.expenses_by_category),
    )


@router.get("/ledger", response_model=LedgerResponse)
async def get_ledger(store: LedgerStore = Depends(get_ledger_store)) -> LedgerResponse:
    """Current transactions and totals."""
    return _ledger_response(store)


@router.post("/ledger/reload", response_model=LedgerResponse)
async def reload_ledger(store: LedgerStore = Depends(get_ledger_store)) -> LedgerResponse:
    """Re-fetch the ledger from storage."""
    await store.reload()
    return _ledger_response(store)


@router.get("/notifications", response_model=NoticeListResponse)
async def drain_notifications(
    notifier: RecordingNotifier = Depends(get_notifier),
) -> NoticeListResponse:
    """Return pending notices and clear them."""
    return NoticeListResponse(
        notices=[
            NoticeResponse(event=n.event.value, is_failure=n.is_failure, message=n.message)
            for n in notifier.drain()
        ]
    )
