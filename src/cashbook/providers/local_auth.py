"""In-process auth provider for local and single-user operation."""

import asyncio
import logging
import secrets
import uuid
from datetime import timedelta
from typing import Optional

from cashbook.core.exceptions import ValidationError
from cashbook.core.subscription import Subscription, call_handler
from cashbook.core.timezone import now_utc
from cashbook.domain.models import AuthEvent, AuthSession, Identity
from cashbook.repositories.protocols import AuthStateHandler

logger = logging.getLogger(__name__)

_USER_NAMESPACE = uuid.uuid5(uuid.NAMESPACE_URL, "cashbook:users")


class LocalAuthProvider:
    """
    Auth provider that keeps the session in memory.

    User ids are derived from the e-mail address, so signing in again with
    the same address yields the same identity. State-change handlers are
    awaited one at a time in event order.
    """

    def __init__(self, session_ttl_seconds: int = 3600):
        self._session_ttl = timedelta(seconds=session_ttl_seconds)
        self._session: Optional[AuthSession] = None
        self._handlers: list[AuthStateHandler] = []
        self._dispatch_lock = asyncio.Lock()

    @staticmethod
    def user_id_for(email: str) -> str:
        """Return the stable user id for an e-mail address."""
        return str(uuid.uuid5(_USER_NAMESPACE, email.strip().lower()))

    async def get_session(self) -> Optional[AuthSession]:
        """Return the current session, if any."""
        return self._session

    def on_auth_state_change(self, handler: AuthStateHandler) -> Subscription:
        """Register a state-change handler."""
        self._handlers.append(handler)

        def _remove() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return Subscription(_remove)

    @property
    def handler_count(self) -> int:
        return len(self._handlers)

    async def sign_in(self, email: str) -> AuthSession:
        """Start a session for ``email`` and notify handlers."""
        email = (email or "").strip()
        if "@" not in email:
            raise ValidationError(f"Invalid e-mail address: {email!r}")

        identity = Identity(user_id=self.user_id_for(email), email=email.lower())
        self._session = self._new_session(identity)
        logger.info("Signed in user %s", identity.user_id)
        await self._emit(AuthEvent.SIGNED_IN, self._session)
        return self._session

    async def refresh_session(self) -> Optional[AuthSession]:
        """Issue a new token for the current identity."""
        if self._session is None:
            return None
        self._session = self._new_session(self._session.identity)
        await self._emit(AuthEvent.TOKEN_REFRESHED, self._session)
        return self._session

    async def sign_out(self) -> None:
        """End the current session; a no-op when nobody is signed in."""
        if self._session is None:
            return
        user_id = self._session.identity.user_id
        self._session = None
        logger.info("Signed out user %s", user_id)
        await self._emit(AuthEvent.SIGNED_OUT, None)

    def _new_session(self, identity: Identity) -> AuthSession:
        return AuthSession(
            identity=identity,
            access_token=secrets.token_urlsafe(32),
            expires_at=now_utc() + self._session_ttl,
        )

    async def _emit(self, event: AuthEvent, session: Optional[AuthSession]) -> None:
        async with self._dispatch_lock:
            for handler in list(self._handlers):
                try:
                    await call_handler(handler, event, session)
                except Exception:
                    # One broken subscriber must not starve the others
                    logger.exception("Auth state handler failed for %s", event.value)
