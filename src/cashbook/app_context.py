"""Application context: the composition root for the ledger core.

Builds the collaborators and the ledger store once, and owns their
lifecycle. The FastAPI app keeps one context per process; tests build
their own with an in-memory database.
"""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine

from cashbook.config.settings import Settings, get_settings
from cashbook.providers import LocalAuthProvider, RecordingNotifier
from cashbook.repositories.sqlalchemy import (
    SqlAlchemyTransactionRepository,
    build_engine,
    build_session_factory,
    init_db,
)
from cashbook.services import AnalysisService, LedgerStore, SessionTracker

logger = logging.getLogger(__name__)


class AppContext:
    """
    Application context providing in-process access to all services.

    Call ``start()`` before use and ``close()`` on shutdown; ``close``
    revokes the store's identity subscription and disposes the engine.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        auth_provider: Optional[LocalAuthProvider] = None,
    ):
        self._settings = settings or get_settings()
        self._engine: AsyncEngine = build_engine(self._settings.get_database_url())
        self._session_factory = build_session_factory(self._engine)

        self.auth = auth_provider or LocalAuthProvider()
        self.notifier = RecordingNotifier()
        self.transaction_repo = SqlAlchemyTransactionRepository(self._session_factory)
        self.session_tracker = SessionTracker(self.auth)
        self.ledger = LedgerStore(
            session_tracker=self.session_tracker,
            transaction_repo=self.transaction_repo,
            notifier=self.notifier,
        )
        self.analysis = AnalysisService(
            self.ledger,
            recent_limit=self._settings.recent_transactions_limit,
        )
        self._started = False

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def is_started(self) -> bool:
        return self._started

    async def start(self) -> None:
        """Create tables and initialize the ledger store."""
        if self._started:
            return
        await init_db(self._engine)
        await self.ledger.initialize()
        self._started = True
        logger.info("%s started", self._settings.app_name)

    async def close(self) -> None:
        """Clean up resources."""
        self.ledger.dispose()
        self.session_tracker.close()
        await self._engine.dispose()
        self._started = False
