"""
Ratings services - Business logic layer.

Rating CRUD with score validation and owner-only mutation. Averages are
not maintained here; see apps.pubs.services.rating_aggregation.
"""

from .rating_management import (
    validate_score,
    create_rating,
    get_rating_by_id,
    update_rating,
    delete_rating,
    get_pub_ratings,
    get_user_ratings,
)

from .exceptions import (
    RatingsServiceError,
    RatingNotFoundError,
    InvalidScoreError,
    UnauthorizedRatingActionError,
    PubNotFoundError,
)

__all__ = [
    # Rating Management Services
    'validate_score',
    'create_rating',
    'get_rating_by_id',
    'update_rating',
    'delete_rating',
    'get_pub_ratings',
    'get_user_ratings',
    # Exceptions
    'RatingsServiceError',
    'RatingNotFoundError',
    'InvalidScoreError',
    'UnauthorizedRatingActionError',
    'PubNotFoundError',
]
