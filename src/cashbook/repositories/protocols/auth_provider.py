"""Auth provider protocol."""

from typing import Awaitable, Callable, Optional, Protocol, Union

from cashbook.core.subscription import Subscription
from cashbook.domain.models import AuthEvent, AuthSession

AuthStateHandler = Callable[[AuthEvent, Optional[AuthSession]], Union[None, Awaitable[None]]]


class AuthProvider(Protocol):
    """Interface for the authentication collaborator."""

    async def get_session(self) -> Optional[AuthSession]:
        """Return the existing session, if any."""
        ...

    def on_auth_state_change(self, handler: AuthStateHandler) -> Subscription:
        """Register a handler for session transitions, delivered in event order."""
        ...

    async def sign_out(self) -> None:
        """End the current session."""
        ...
