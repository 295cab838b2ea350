"""API routers package."""

from cashbook.api.routers.auth import router as auth_router
from cashbook.api.routers.ledger import router as ledger_router
from cashbook.api.routers.transactions import router as transactions_router
from cashbook.api.routers.analysis import router as analysis_router

__all__ = [
    "auth_router",
    "ledger_router",
    "transactions_router",
    "analysis_router",
]
