"""Pub CRUD operations service."""

import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.contrib.auth import get_user_model
from uuid import UUID
from typing import Optional

from apps.common.db import bounded_query
from ..models import Pub
from .exceptions import PubNotFoundError
from .geo import validate_coordinates
from .rating_aggregation import with_rating_aggregates

User = get_user_model()

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    'name',
    'address',
    'latitude',
    'longitude',
    'phone_number',
    'website',
    'opening_hours',
)


def get_pub_by_id(*, pub_id: UUID, timeout: Optional[float] = None) -> Pub:
    """
    Retrieve a pub with its average rating and photos.

    Args:
        pub_id: Pub UUID
        timeout: Query timeout in seconds (defaults to QUERY_TIMEOUT_SECONDS)

    Raises:
        PubNotFoundError: If pub doesn't exist
        BackingStoreError: If the query fails or times out
    """
    queryset = with_rating_aggregates(Pub.objects.all()).prefetch_related('photos')
    with bounded_query(timeout):
        try:
            return queryset.get(id=pub_id)
        except (Pub.DoesNotExist, DjangoValidationError, ValueError):
            raise PubNotFoundError("Pub not found")


@transaction.atomic
def create_pub(
    *,
    name: str,
    address: str,
    latitude: float,
    longitude: float,
    created_by: Optional[User] = None,
    phone_number: str = '',
    website: str = '',
    opening_hours: str = '',
) -> Pub:
    """
    Create a new pub.

    Returns:
        Created Pub, re-read with its (empty) rating aggregate

    Raises:
        InvalidCoordinatesError: If coordinates are missing or out of range
    """
    latitude, longitude = validate_coordinates(latitude, longitude)

    pub = Pub.objects.create(
        name=name,
        address=address,
        latitude=latitude,
        longitude=longitude,
        phone_number=phone_number or '',
        website=website or '',
        opening_hours=opening_hours or '',
        created_by=created_by,
    )

    logger.info("Created pub %s (%s)", pub.id, pub.name)
    return get_pub_by_id(pub_id=pub.id)


@transaction.atomic
def update_pub(*, pub_id: UUID, **fields) -> Pub:
    """
    Partially update a pub.

    Args:
        pub_id: Pub UUID
        **fields: Any of UPDATABLE_FIELDS

    Raises:
        PubNotFoundError: If pub doesn't exist
        InvalidCoordinatesError: If new coordinates are out of range
    """
    unknown = set(fields) - set(UPDATABLE_FIELDS)
    if unknown:
        raise TypeError(f"Cannot update pub fields: {', '.join(sorted(unknown))}")

    try:
        pub = Pub.objects.select_for_update().get(id=pub_id)
    except (Pub.DoesNotExist, DjangoValidationError, ValueError):
        raise PubNotFoundError("Pub not found")

    if 'latitude' in fields or 'longitude' in fields:
        fields['latitude'], fields['longitude'] = validate_coordinates(
            fields.get('latitude', pub.latitude),
            fields.get('longitude', pub.longitude),
        )

    for attr, value in fields.items():
        setattr(pub, attr, value)

    if fields:
        pub.save(update_fields=[*fields, 'updated_at'])

    return get_pub_by_id(pub_id=pub.id)


@transaction.atomic
def delete_pub(*, pub_id: UUID) -> None:
    """
    Delete a pub together with its ratings and photos.

    Raises:
        PubNotFoundError: If pub doesn't exist
    """
    try:
        pub = Pub.objects.get(id=pub_id)
    except (Pub.DoesNotExist, DjangoValidationError, ValueError):
        raise PubNotFoundError("Pub not found")

    pub.delete()
    logger.info("Deleted pub %s", pub_id)
