"""Rating management service - CRUD operations for ratings."""

import logging
import math

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.db.models import QuerySet
from decimal import Decimal
from uuid import UUID
from typing import Optional

from apps.accounts.models import User
from apps.accounts.services import get_user_by_id
from apps.pubs.models import Pub
from apps.ratings.models import Rating, MIN_SCORE, MAX_SCORE
from .exceptions import (
    RatingNotFoundError,
    InvalidScoreError,
    PubNotFoundError,
    UnauthorizedRatingActionError,
)

logger = logging.getLogger(__name__)

INVALID_ID_ERRORS = (DjangoValidationError, ValueError)


def validate_score(score) -> float:
    """
    Check a score before it is persisted.

    Args:
        score: Number in [1, 10]

    Returns:
        The score as float

    Raises:
        InvalidScoreError: If missing, not numeric, not finite or out of range
    """
    if score is None or isinstance(score, bool) or not isinstance(score, (int, float, Decimal, str)):
        raise InvalidScoreError("Score must be a number between 1 and 10")

    try:
        value = float(score)
    except (TypeError, ValueError):
        raise InvalidScoreError("Score must be a number between 1 and 10")

    if not math.isfinite(value) or not (MIN_SCORE <= value <= MAX_SCORE):
        raise InvalidScoreError("Score must be between 1 and 10")

    return value


def _get_rating_for_update(rating_id: UUID) -> Rating:
    try:
        return (
            Rating.objects
            .select_for_update()
            .get(id=rating_id)
        )
    except (Rating.DoesNotExist, *INVALID_ID_ERRORS):
        raise RatingNotFoundError("Rating not found")


@transaction.atomic
def create_rating(
    *,
    user: User,
    pub_id: UUID,
    score,
    comment: str = '',
) -> Rating:
    """
    Create a new rating for a pub.

    The score is validated before anything is written. A user may rate the
    same pub several times.

    Args:
        user: User submitting the rating
        pub_id: UUID of rated pub
        score: Score (1-10)
        comment: Optional free text

    Returns:
        Created Rating instance

    Raises:
        InvalidScoreError: If score not in 1-10 range
        PubNotFoundError: If pub doesn't exist
    """
    score = validate_score(score)

    try:
        pub = Pub.objects.get(id=pub_id)
    except (Pub.DoesNotExist, *INVALID_ID_ERRORS):
        raise PubNotFoundError("Pub not found")

    rating = Rating.objects.create(
        user=user,
        pub=pub,
        score=score,
        comment=comment or '',
    )

    logger.info("User %s rated pub %s with %s", user.id, pub.id, score)
    return rating


def get_rating_by_id(*, rating_id: UUID) -> Rating:
    """
    Retrieve a rating by ID.

    Raises:
        RatingNotFoundError: If rating doesn't exist
    """
    try:
        return (
            Rating.objects
            .select_related('user', 'pub')
            .prefetch_related('photos')
            .get(id=rating_id)
        )
    except (Rating.DoesNotExist, *INVALID_ID_ERRORS):
        raise RatingNotFoundError("Rating not found")


@transaction.atomic
def update_rating(
    *,
    rating_id: UUID,
    user: User,
    score=None,
    comment: Optional[str] = None,
) -> Rating:
    """
    Update score and/or comment of a rating.

    Only the rating owner can update it. Pub and owner cannot be changed.

    Raises:
        RatingNotFoundError: If rating doesn't exist
        UnauthorizedRatingActionError: If user is not the owner
        InvalidScoreError: If score not in 1-10 range
    """
    rating = _get_rating_for_update(rating_id)

    if rating.user_id != user.id:
        raise UnauthorizedRatingActionError("You can only update your own ratings")

    if score is not None:
        rating.score = validate_score(score)
    if comment is not None:
        rating.comment = comment

    rating.save()

    return get_rating_by_id(rating_id=rating.id)


@transaction.atomic
def delete_rating(*, rating_id: UUID, user: User) -> None:
    """
    Delete a rating and its photos.

    Only the rating owner can delete it.

    Raises:
        RatingNotFoundError: If rating doesn't exist
        UnauthorizedRatingActionError: If user is not the owner
    """
    rating = _get_rating_for_update(rating_id)

    if rating.user_id != user.id:
        logger.warning("User %s tried to delete rating %s of user %s", user.id, rating.id, rating.user_id)
        raise UnauthorizedRatingActionError("You can only delete your own ratings")

    rating.delete()
    logger.info("Deleted rating %s", rating_id)


def get_pub_ratings(*, pub_id: UUID) -> QuerySet[Rating]:
    """
    All ratings of a pub, newest first, with author and photos.

    Raises:
        PubNotFoundError: If pub doesn't exist
    """
    try:
        if not Pub.objects.filter(id=pub_id).exists():
            raise PubNotFoundError("Pub not found")
    except INVALID_ID_ERRORS:
        raise PubNotFoundError("Pub not found")

    return (
        Rating.objects
        .filter(pub_id=pub_id)
        .select_related('user')
        .prefetch_related('photos')
        .order_by('-date')
    )


def get_user_ratings(*, user_id: UUID) -> QuerySet[Rating]:
    """
    All ratings by a user, newest first, with pub and photos.

    Raises:
        UserNotFoundError: If user doesn't exist
    """
    user = get_user_by_id(user_id=user_id)

    return (
        Rating.objects
        .filter(user=user)
        .select_related('pub')
        .prefetch_related('photos')
        .order_by('-date')
    )
