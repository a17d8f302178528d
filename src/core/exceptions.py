"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"

    # Validation errors (400 / 422)
    INVALID_PAYLOAD = "INVALID_PAYLOAD"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ProfileNotFoundError(AppException):
    """Profile not found, or the identifier can never match a stored profile."""

    def __init__(self, profile_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message=f"Profile not found: {profile_id!r}",
            status_code=404,
            details={"profile_id": profile_id},
        )


class InvalidPayloadError(AppException):
    """Required profile fields are missing or empty."""

    def __init__(self, fields: list[str]) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_PAYLOAD,
            message=f"Invalid payload, empty fields: {', '.join(fields)}",
            status_code=400,
            details={"fields": fields},
        )


class ProfileRetrievalError(AppException):
    """Profiles could not be read from storage."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            error_code=ErrorCode.DATABASE_ERROR,
            message="Failed to retrieve profiles",
            status_code=500,
            details={"reason": reason},
        )
