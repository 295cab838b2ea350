"""Revocable handler registrations."""

import inspect
from typing import Any, Awaitable, Callable, Optional, Union

Handler = Callable[..., Union[None, Awaitable[None]]]


class Subscription:
    """
    Cancellation token returned by every subscribe call.

    The owner of a subscription must call ``unsubscribe()`` when it is
    disposed; until then the registered handler keeps being invoked.
    """

    def __init__(self, on_unsubscribe: Optional[Callable[[], None]] = None):
        self._on_unsubscribe = on_unsubscribe
        self._active = True

    @property
    def active(self) -> bool:
        """Return True while the registration is in effect."""
        return self._active

    def unsubscribe(self) -> None:
        """Revoke the registration. Safe to call more than once."""
        if not self._active:
            return
        self._active = False
        if self._on_unsubscribe is not None:
            callback, self._on_unsubscribe = self._on_unsubscribe, None
            callback()

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.unsubscribe()


async def call_handler(handler: Handler, *args: Any) -> None:
    """Invoke a sync or async handler and await it if needed."""
    result = handler(*args)
    if inspect.isawaitable(result):
        await result
