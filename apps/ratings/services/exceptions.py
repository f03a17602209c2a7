"""Domain exceptions for ratings app."""

from apps.common.exceptions import (
    AuthorizationError,
    NotFoundError,
    PintPerfectError,
    ValidationError,
)
from apps.pubs.services.exceptions import PubNotFoundError


class RatingsServiceError(PintPerfectError):
    """Base exception for all ratings service errors."""
    pass


class RatingNotFoundError(RatingsServiceError, NotFoundError):
    """Rating does not exist."""
    pass


class InvalidScoreError(RatingsServiceError, ValidationError):
    """Score must be a number between 1 and 10."""
    pass


class UnauthorizedRatingActionError(RatingsServiceError, AuthorizationError):
    """User cannot modify this rating."""
    pass


__all__ = [
    'RatingsServiceError',
    'RatingNotFoundError',
    'InvalidScoreError',
    'UnauthorizedRatingActionError',
    'PubNotFoundError',
]
