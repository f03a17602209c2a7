"""Domain exceptions for photos app."""

from apps.common.exceptions import (
    AuthorizationError,
    NotFoundError,
    PintPerfectError,
    ValidationError,
)
from apps.pubs.services.exceptions import PubNotFoundError
from apps.ratings.services.exceptions import RatingNotFoundError


class PhotosServiceError(PintPerfectError):
    """Base exception for all photos service errors."""
    pass


class PhotoNotFoundError(PhotosServiceError, NotFoundError):
    """Photo does not exist."""
    pass


class InvalidImageError(PhotosServiceError, ValidationError):
    """Uploaded image is missing or malformed."""
    pass


class PhotoTargetMismatchError(PhotosServiceError, ValidationError):
    """Rating given for the photo belongs to a different pub."""
    pass


class UnauthorizedPhotoActionError(PhotosServiceError, AuthorizationError):
    """User cannot modify this photo or attach it to this rating."""
    pass


__all__ = [
    'PhotosServiceError',
    'PhotoNotFoundError',
    'InvalidImageError',
    'PhotoTargetMismatchError',
    'UnauthorizedPhotoActionError',
    'PubNotFoundError',
    'RatingNotFoundError',
]
