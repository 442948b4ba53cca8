from abc import ABC
from enum import StrEnum


class ErrorKind(StrEnum):
    """Failure kinds the account procedures can report."""

    DUPLICATE_ACCOUNT = "duplicate_account"
    INVALID_CREDENTIALS = "invalid_credentials"
    INTERNAL_FAILURE = "internal_failure"


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """

    kind: ErrorKind


class DuplicateAccountError(UserError):
    """Raised when registering an email that already has an account."""

    kind = ErrorKind.DUPLICATE_ACCOUNT

    def __init__(self, message: str = "User Email already exists") -> None:
        super().__init__(message)


class InvalidCredentialsError(UserError):
    """Raised when login fails, whether the email is unknown or the password is wrong."""

    kind = ErrorKind.INVALID_CREDENTIALS

    def __init__(self, message: str = "Mail or password is incorrect") -> None:
        super().__init__(message)


class InternalError(Exception):
    """Raised when a collaborator (store, hashing, signing) fails unexpectedly.

    The original exception is chained as ``__cause__`` and logged; only the
    generic message reaches the client.
    """

    kind = ErrorKind.INTERNAL_FAILURE

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message)
