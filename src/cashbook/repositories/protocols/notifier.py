"""Notification sink protocol."""

from typing import Optional, Protocol

from cashbook.domain.models import LedgerEvent


class Notifier(Protocol):
    """Receives named ledger events for display to the user."""

    def notify(self, event: LedgerEvent, error: Optional[Exception] = None) -> None:
        """Signal an event; ``error`` carries the failure for failure events."""
        ...
