"""Error codes returned by the admin use cases."""
from sqlalchemy.exc import SQLAlchemyError
from libs.result import Error

INVALID_INPUT = "INVALID_INPUT"
INVALID_PAGINATION = "INVALID_PAGINATION"
STORE_FAILURE = "STORE_FAILURE"

DEAD_LETTER_NOT_FOUND = "DEAD_LETTER_NOT_FOUND"
INCOMING_ENVELOPE_NOT_FOUND = "INCOMING_ENVELOPE_NOT_FOUND"
NODE_NOT_FOUND = "NODE_NOT_FOUND"
NODE_ASSIGNMENT_NOT_FOUND = "NODE_ASSIGNMENT_NOT_FOUND"

# Raised by the driver or the pool when the store is unreachable or rejects a statement
STORE_ERRORS = (SQLAlchemyError, OSError)


def store_failure(exc: Exception) -> Error:
    return Error(
        code=STORE_FAILURE,
        message="Message store operation failed",
        reason=f"{type(exc).__name__}: {exc}",
    )


def invalid_input(message: str) -> Error:
    return Error(code=INVALID_INPUT, message=message)
