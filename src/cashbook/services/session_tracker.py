"""Session tracker: follows auth state and fans identity changes out."""

import logging
from typing import Awaitable, Callable, Optional, Union

from cashbook.core.exceptions import AppError
from cashbook.core.subscription import Subscription, call_handler
from cashbook.domain.models import AuthEvent, AuthSession, Identity
from cashbook.repositories.protocols import AuthProvider

logger = logging.getLogger(__name__)

IdentityHandler = Callable[[Optional[Identity]], Union[None, Awaitable[None]]]


class SessionTracker:
    """
    Exposes the current identity and notifies subscribers when it changes.

    The identity is resolved once by ``start()``; afterwards it follows the
    auth provider's event stream. Handlers are awaited in event order and
    may see the same identity more than once (e.g. on token refresh).
    """

    def __init__(self, auth_provider: AuthProvider):
        self._auth = auth_provider
        self._identity: Optional[Identity] = None
        self._handlers: list[IdentityHandler] = []
        self._auth_subscription: Optional[Subscription] = None
        self._started = False

    @property
    def current_identity(self) -> Optional[Identity]:
        """Return the signed-in identity, or None."""
        return self._identity

    @property
    def is_started(self) -> bool:
        return self._started

    async def start(self) -> Optional[Identity]:
        """
        Resolve the existing session and begin following auth events.

        Returns the identity found at startup. Calling start twice is an
        error; the tracker owns exactly one auth subscription.
        """
        if self._started:
            raise AppError("Session tracker already started")
        self._started = True

        # Subscribe before reading the session so no transition is missed
        self._auth_subscription = self._auth.on_auth_state_change(self._on_auth_state_change)
        session = await self._auth.get_session()
        self._identity = session.identity if session else None
        logger.debug("Session tracker started (identity=%s)", self._user_id(self._identity))
        return self._identity

    def subscribe(self, handler: IdentityHandler) -> Subscription:
        """Register an identity-change handler; revoke via the returned token."""
        self._handlers.append(handler)

        def _remove() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return Subscription(_remove)

    @property
    def subscriber_count(self) -> int:
        return len(self._handlers)

    async def sign_out(self) -> None:
        """Ask the auth provider to end the session."""
        await self._auth.sign_out()

    def close(self) -> None:
        """Release the auth subscription and drop all handlers."""
        if self._auth_subscription is not None:
            self._auth_subscription.unsubscribe()
            self._auth_subscription = None
        self._handlers.clear()

    async def _on_auth_state_change(
        self,
        event: AuthEvent,
        session: Optional[AuthSession],
    ) -> None:
        identity = session.identity if session else None
        logger.debug("Auth event %s (identity=%s)", event.value, self._user_id(identity))
        self._identity = identity
        for handler in list(self._handlers):
            await call_handler(handler, identity)

    @staticmethod
    def _user_id(identity: Optional[Identity]) -> Optional[str]:
        return identity.user_id if identity else None
