"""
Rating aggregation service.

A pub's average rating is derived from its live ratings on every read and
never stored. "No ratings yet" is reported as ``None``, never as 0.0.
"""

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import Avg, Count, QuerySet
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional
from uuid import UUID

from apps.common.db import bounded_query
from ..models import Pub
from .exceptions import PubNotFoundError


def format_average(value: Optional[float]) -> Optional[str]:
    """
    Display form of an average, one decimal, half up.

    >>> format_average(9.1666)
    '9.2'
    """
    if value is None:
        return None
    return str(Decimal(str(value)).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP))


def with_rating_aggregates(queryset: QuerySet[Pub]) -> QuerySet[Pub]:
    """
    Annotate pubs with ``average_rating`` and ``rating_count``.

    One grouped aggregation for the whole queryset instead of one query per
    pub. ``average_rating`` is None for pubs without ratings.
    """
    return queryset.annotate(
        average_rating=Avg('ratings__score'),
        rating_count=Count('ratings'),
    )


def get_pub_rating_summary(*, pub_id: UUID, timeout: Optional[float] = None) -> dict:
    """
    Average and count of ratings for one pub.

    Args:
        pub_id: Pub UUID
        timeout: Query timeout in seconds (defaults to QUERY_TIMEOUT_SECONDS)

    Returns:
        Dictionary with pub_id, average_rating (float or None), rating_count

    Raises:
        PubNotFoundError: If pub doesn't exist
        BackingStoreError: If the query fails or times out
    """
    with bounded_query(timeout):
        try:
            pub = with_rating_aggregates(Pub.objects.filter(id=pub_id)).get()
        except (Pub.DoesNotExist, DjangoValidationError, ValueError):
            raise PubNotFoundError("Pub not found")

    return {
        'pub_id': pub.id,
        'average_rating': pub.average_rating,
        'rating_count': pub.rating_count,
    }
