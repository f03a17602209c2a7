"""Domain-specific exceptions for accounts services."""

from apps.common.exceptions import (
    AuthenticationError,
    NotFoundError,
    PintPerfectError,
    ValidationError,
)


class AccountsServiceError(PintPerfectError):
    """Base exception for accounts services."""
    pass


class DuplicateUserError(AccountsServiceError, ValidationError):
    """Raised when email or username is already taken."""
    pass


class InvalidCredentialsError(AccountsServiceError, AuthenticationError):
    """Raised when authentication credentials are invalid."""
    pass


class InactiveAccountError(AccountsServiceError, AuthenticationError):
    """Raised when account is deactivated."""
    pass


class UserNotFoundError(AccountsServiceError, NotFoundError):
    """Raised when user does not exist."""
    pass
