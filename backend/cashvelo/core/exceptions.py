"""Domain errors raised by services and translated at the HTTP boundary."""

from fastapi import status


class AppError(Exception):
    """Base class for errors that map onto a structured HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "internal_error"
    default_message: str = "Something went wrong!"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.message, "code": self.code}


class BadRequestError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "bad_request"
    default_message = "Invalid request"


class UnauthorizedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "unauthorized"
    default_message = "Access token required"


class ForbiddenError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "forbidden"
    default_message = "Invalid or expired token"


class NotFoundError(AppError):
    """Resource missing, or owned by someone else. Callers cannot tell which."""

    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"
    default_message = "Not found"


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    code = "conflict"
    default_message = "Resource already exists"


class InvalidAmountError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "invalid_amount"
    default_message = "Amount must be greater than 0"


class InsufficientFundsError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "insufficient_funds"
    default_message = "Withdrawal amount exceeds current savings"


class EmailDeliveryError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "email_delivery_failed"
    default_message = "Failed to send email. Please try again."
