"""
Error kinds and the one table that turns them into HTTP statuses.

Every failure the API reports is an ApiError tagged with an ErrorKind.
The status code comes from status_for(), never from the exception type.
"""

from enum import Enum

INTERNAL_MESSAGE = "Internal Server Error"


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    VALIDATION_FAILURE = "validation_failure"
    INTERNAL = "internal"


# VALIDATION_FAILURE is resolved in status_for() because it depends on settings
STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION_FAILURE: 400,
    ErrorKind.INTERNAL: 500,
}

LEGACY_VALIDATION_STATUS = 500


class ApiError(Exception):
    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"ApiError({self.kind.value!r}, {self.message!r})"


def not_found(message: str) -> ApiError:
    return ApiError(ErrorKind.NOT_FOUND, message)


def validation_failure(message: str) -> ApiError:
    return ApiError(ErrorKind.VALIDATION_FAILURE, message)


def internal(message: str = INTERNAL_MESSAGE) -> ApiError:
    return ApiError(ErrorKind.INTERNAL, message)


def status_for(kind: ErrorKind, legacy_validation_status: bool = False) -> int:
    if kind is ErrorKind.VALIDATION_FAILURE and legacy_validation_status:
        return LEGACY_VALIDATION_STATUS
    return STATUS_BY_KIND[kind]


def error_body(message: str, status: int) -> dict:
    return {"error": {"message": message, "status": status}}


def to_response(error: ApiError, legacy_validation_status: bool = False) -> tuple[int, dict]:
    """
    Returns (status, body) for an ApiError.
    Internal errors never expose their own message to the client.
    """
    status = status_for(error.kind, legacy_validation_status)
    message = INTERNAL_MESSAGE if error.kind is ErrorKind.INTERNAL else error.message
    return status, error_body(message, status)
