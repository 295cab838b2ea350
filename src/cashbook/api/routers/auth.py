"""Local sign-in / sign-out endpoints."""

from fastapi import APIRouter, Depends, status

from cashbook.api.deps import get_auth_provider, get_session_tracker
from cashbook.api.schemas import SessionResponse, SignInRequest
from cashbook.providers import LocalAuthProvider
from cashbook.services import SessionTracker

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/sign-in", response_model=SessionResponse)
async def sign_in(
    request: SignInRequest,
    auth: LocalAuthProvider = Depends(get_auth_provider),
) -> SessionResponse:
    """Sign in; the ledger reloads for the new identity before this returns."""
    session = await auth.sign_in(request.email)
    return SessionResponse(
        signed_in=True,
        user_id=session.identity.user_id,
        email=session.identity.email,
        expires_at=session.expires_at,
    )


@router.post("/sign-out", status_code=status.HTTP_204_NO_CONTENT)
async def sign_out(tracker: SessionTracker = Depends(get_session_tracker)) -> None:
    """Sign out; the ledger is cleared."""
    await tracker.sign_out()


@router.get("/session", response_model=SessionResponse)
async def get_session(tracker: SessionTracker = Depends(get_session_tracker)) -> SessionResponse:
    """Return the current identity."""
    identity = tracker.current_identity
    if identity is None:
        return SessionResponse(signed_in=False)
    return SessionResponse(signed_in=True, user_id=identity.user_id, email=identity.email)
