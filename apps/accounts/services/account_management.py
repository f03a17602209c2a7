"""Account lookup and profile management service."""

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model
from uuid import UUID
from typing import Optional

from .exceptions import DuplicateUserError, UserNotFoundError

User = get_user_model()


def get_user_by_id(*, user_id: UUID) -> User:
    """
    Retrieve an active user.

    Raises:
        UserNotFoundError: If user doesn't exist or is deactivated
    """
    try:
        return User.objects.get(id=user_id, is_active=True)
    except (User.DoesNotExist, DjangoValidationError, ValueError):
        raise UserNotFoundError("User not found")


@transaction.atomic
def update_profile(
    *,
    user: User,
    username: Optional[str] = None,
    email: Optional[str] = None,
    profile_picture: Optional[str] = None,
) -> User:
    """
    Update the public profile of a user.

    Only provided fields are changed.

    Raises:
        DuplicateUserError: If the new email or username is taken
    """
    update_fields = []

    if username is not None and username != user.username:
        if User.objects.filter(username__iexact=username).exclude(id=user.id).exists():
            raise DuplicateUserError("Username already in use")
        user.username = username
        update_fields.append('username')

    if email is not None:
        email = User.objects.normalize_email(email)
        if email != user.email:
            if User.objects.filter(email__iexact=email).exclude(id=user.id).exists():
                raise DuplicateUserError("Email already in use")
            user.email = email
            update_fields.append('email')

    if profile_picture is not None:
        user.profile_picture = profile_picture or None
        update_fields.append('profile_picture')

    if update_fields:
        try:
            with transaction.atomic():
                user.save(update_fields=update_fields)
        except IntegrityError:
            # Lost a race against a concurrent change to the same name
            raise DuplicateUserError("Email or username already in use")

    return user
