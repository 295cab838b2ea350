"""Core utilities and shared functionality."""

from cashbook.core.timezone import now_utc, to_utc, parse_date, UTC
from cashbook.core.subscription import Subscription, call_handler
from cashbook.core.exceptions import (
    AppError,
    ValidationError,
    NotAuthenticatedError,
    CollaboratorError,
    FetchFailedError,
    AddFailedError,
    DeleteFailedError,
)

__all__ = [
    "now_utc",
    "to_utc",
    "parse_date",
    "UTC",
    "Subscription",
    "call_handler",
    "AppError",
    "ValidationError",
    "NotAuthenticatedError",
    "CollaboratorError",
    "FetchFailedError",
    "AddFailedError",
    "DeleteFailedError",
]
