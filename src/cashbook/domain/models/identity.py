"""Identity and session models supplied by the auth provider."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Identity:
    """The authenticated principal that owns ledger entries."""

    user_id: str
    email: Optional[str] = None


@dataclass(frozen=True)
class AuthSession:
    """An active session as reported by the auth provider."""

    identity: Identity
    access_token: str
    expires_at: Optional[datetime] = None
