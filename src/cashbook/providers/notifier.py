"""Notification sinks for ledger events."""

import logging
from dataclasses import dataclass
from typing import Optional

from cashbook.domain.models import LedgerEvent

logger = logging.getLogger(__name__)


class LoggingNotifier:
    """Writes ledger events to the application log."""

    def notify(self, event: LedgerEvent, error: Optional[Exception] = None) -> None:
        if event.is_failure:
            logger.warning("Ledger event %s: %s", event.value, error)
        else:
            logger.info("Ledger event %s", event.value)


@dataclass
class Notice:
    """A recorded ledger event."""

    event: LedgerEvent
    message: Optional[str] = None

    @property
    def is_failure(self) -> bool:
        return self.event.is_failure


class RecordingNotifier(LoggingNotifier):
    """Logs events and keeps them until the view layer drains them."""

    def __init__(self) -> None:
        self._notices: list[Notice] = []

    def notify(self, event: LedgerEvent, error: Optional[Exception] = None) -> None:
        super().notify(event, error)
        self._notices.append(Notice(event=event, message=str(error) if error else None))

    @property
    def notices(self) -> list[Notice]:
        return list(self._notices)

    def events(self) -> list[LedgerEvent]:
        """Return the recorded event names in order."""
        return [n.event for n in self._notices]

    def drain(self) -> list[Notice]:
        """Return and forget all recorded notices."""
        notices, self._notices = self._notices, []
        return notices
