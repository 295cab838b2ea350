"""Dependency injection for FastAPI."""

from fastapi import Depends, Request

from cashbook.app_context import AppContext
from cashbook.providers import LocalAuthProvider, RecordingNotifier
from cashbook.services import AnalysisService, LedgerStore, SessionTracker


def get_app_context(request: Request) -> AppContext:
    """Provide the AppContext created by the lifespan handler."""
    return request.app.state.context


def get_ledger_store(context: AppContext = Depends(get_app_context)) -> LedgerStore:
    """Provide the LedgerStore instance."""
    return context.ledger


def get_session_tracker(context: AppContext = Depends(get_app_context)) -> SessionTracker:
    """Provide the SessionTracker instance."""
    return context.session_tracker


def get_auth_provider(context: AppContext = Depends(get_app_context)) -> LocalAuthProvider:
    """Provide the auth provider."""
    return context.auth


def get_analysis_service(context: AppContext = Depends(get_app_context)) -> AnalysisService:
    """Provide the AnalysisService instance."""
    return context.analysis


def get_notifier(context: AppContext = Depends(get_app_context)) -> RecordingNotifier:
    """Provide the notifier holding pending notices."""
    return context.notifier
