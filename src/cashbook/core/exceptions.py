"""Application-level exceptions."""

from typing import Optional


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotAuthenticatedError(AppError):
    """Raised when a mutating ledger operation is attempted with no identity."""

    def __init__(self, operation: str):
        super().__init__(
            f"Cannot {operation} transactions without a signed-in user",
            code="NOT_AUTHENTICATED",
        )


class CollaboratorError(AppError):
    """
    Base for failures reported by the persistence collaborator.

    The underlying exception is kept on ``cause`` (and chained as
    ``__cause__`` by the raiser).
    """

    def __init__(self, message: str, code: str, cause: Optional[BaseException] = None):
        self.cause = cause
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message, code=code)


class FetchFailedError(CollaboratorError):
    """Raised when the ledger could not be loaded."""

    def __init__(self, cause: Optional[BaseException] = None):
        super().__init__("Failed to fetch transactions", "FETCH_FAILED", cause)


class AddFailedError(CollaboratorError):
    """Raised when a new transaction was not accepted."""

    def __init__(self, cause: Optional[BaseException] = None):
        super().__init__("Failed to add transaction", "ADD_FAILED", cause)


class DeleteFailedError(CollaboratorError):
    """Raised when a transaction could not be deleted."""

    def __init__(self, txn_id: str, cause: Optional[BaseException] = None):
        self.txn_id = txn_id
        super().__init__(f"Failed to delete transaction {txn_id}", "DELETE_FAILED", cause)
