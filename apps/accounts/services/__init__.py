"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    DuplicateUserError,
    InvalidCredentialsError,
    InactiveAccountError,
    UserNotFoundError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user
from .account_management import get_user_by_id, update_profile

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'DuplicateUserError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'UserNotFoundError',
    # Services
    'register_user',
    'authenticate_user',
    'get_user_by_id',
    'update_profile',
]
