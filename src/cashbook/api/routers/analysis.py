"""Analytics endpoints for charts and the dashboard."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from cashbook.api.deps import get_analysis_service
from cashbook.api.schemas import (
    CategoryBreakdownItemResponse,
    CategoryBreakdownResponse,
    ComparisonBarResponse,
    IncomeVsExpensesResponse,
    TransactionListResponse,
    TransactionResponse,
)
from cashbook.services import AnalysisService

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("/categories", response_model=CategoryBreakdownResponse)
async def get_category_breakdown(
    analysis: AnalysisService = Depends(get_analysis_service),
) -> CategoryBreakdownResponse:
    """Expenses grouped by category with percentage shares."""
    view = analysis.category_breakdown()
    return CategoryBreakdownResponse(
        items=[
            CategoryBreakdownItemResponse(
                category=item.category,
                amount=item.amount,
                percentage=item.percentage,
            )
            for item in view.items
        ],
        total_expenses=view.total_expenses,
    )


@router.get("/income-vs-expenses", response_model=IncomeVsExpensesResponse)
async def get_income_vs_expenses(
    analysis: AnalysisService = Depends(get_analysis_service),
) -> IncomeVsExpensesResponse:
    return IncomeVsExpensesResponse(
        bars=[ComparisonBarResponse(name=name, amount=amount) for name, amount in analysis.income_vs_expenses()]
    )


@router.get("/recent", response_model=TransactionListResponse)
async def get_recent(
    limit: Optional[int] = Query(None, ge=0, le=100),
    analysis: AnalysisService = Depends(get_analysis_service),
) -> TransactionListResponse:
    """Most recent entries for the dashboard."""
    rows = analysis.recent(limit)
    return TransactionListResponse(
        transactions=[TransactionResponse.model_validate(t) for t in rows],
        count=len(rows),
    )
