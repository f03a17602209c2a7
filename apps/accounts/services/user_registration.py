"""User registration service."""

import logging

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from .exceptions import DuplicateUserError

User = get_user_model()

logger = logging.getLogger(__name__)


@transaction.atomic
def register_user(
    *,
    username: str,
    email: str,
    password: str,
) -> User:
    """
    Register a new user.

    Args:
        username: Unique public name
        email: Unique login email
        password: Plain password (will be hashed)

    Returns:
        Created User instance

    Raises:
        DuplicateUserError: If email or username is already in use
    """
    email = User.objects.normalize_email(email)

    if User.objects.filter(email__iexact=email).exists():
        raise DuplicateUserError("Email already in use")

    if User.objects.filter(username__iexact=username).exists():
        raise DuplicateUserError("Username already in use")

    try:
        with transaction.atomic():
            user = User.objects.create_user(
                email=email,
                password=password,
                username=username,
            )
    except IntegrityError:
        # Lost a race against a concurrent registration
        raise DuplicateUserError("Email or username already in use")

    logger.info("Registered user %s", user.id)
    return user
