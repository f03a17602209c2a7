"""Pub listing and nearby search service."""

import logging

from django.conf import settings
from django.db.models import Q, QuerySet
from typing import Optional

from apps.common.db import bounded_query
from ..models import Pub
from .geo import BoundingBox, bounding_box, haversine_km, validate_search_area
from .rating_aggregation import with_rating_aggregates

logger = logging.getLogger(__name__)

DEFAULT_RADIUS_KM = 5.0


def list_pubs(*, search: Optional[str] = None, timeout: Optional[float] = None) -> list[Pub]:
    """
    All pubs with their derived average rating, ordered by name.

    Args:
        search: Optional term matched against name and address
        timeout: Query timeout in seconds (defaults to QUERY_TIMEOUT_SECONDS)

    Returns:
        List of Pub instances

    Raises:
        BackingStoreError: If the query fails or times out
    """
    queryset = Pub.objects.all()

    if search:
        queryset = queryset.filter(
            Q(name__icontains=search) |
            Q(address__icontains=search)
        )

    # Meta.ordering is dropped once the aggregate adds a GROUP BY
    with bounded_query(timeout):
        return list(with_rating_aggregates(queryset).order_by('name', 'id'))


def pubs_in_bounding_box(box: BoundingBox) -> QuerySet[Pub]:
    """
    Pubs whose stored coordinates fall inside the box.

    Plain range predicates on latitude and longitude, scanned without a
    spatial index.
    """
    longitude_filter = Q()
    for low, high in box.longitude_ranges():
        longitude_filter |= Q(longitude__range=(low, high))

    return Pub.objects.filter(
        longitude_filter,
        latitude__range=(box.min_latitude, box.max_latitude),
    )


def find_nearby_pubs(
    *,
    latitude,
    longitude,
    radius_km=None,
    strict: bool = False,
    timeout: Optional[float] = None,
) -> list[Pub]:
    """
    Pubs near a point, each with its average rating and distance.

    This operation:
    1. Validates the center and radius
    2. Selects pubs inside the bounding box of the search circle
    3. Attaches average_rating and rating_count in the same query
    4. Attaches distance_km and, if strict, drops pubs outside the circle

    Without ``strict`` the result may contain box-corner pubs up to about
    radius * sqrt(2) away. Order is not guaranteed.

    Args:
        latitude: Center latitude in degrees (|lat| <= 85)
        longitude: Center longitude in degrees
        radius_km: Search radius in km, > 0 (defaults to NEARBY_DEFAULT_RADIUS_KM)
        strict: Keep only pubs within radius_km great-circle distance
        timeout: Query timeout in seconds (defaults to QUERY_TIMEOUT_SECONDS)

    Returns:
        List of Pub instances

    Raises:
        InvalidCoordinatesError: Bad center point
        InvalidRadiusError: Bad radius
        BackingStoreError: If the query fails or times out
    """
    if radius_km is None:
        radius_km = getattr(settings, 'NEARBY_DEFAULT_RADIUS_KM', DEFAULT_RADIUS_KM)

    latitude, longitude, radius_km = validate_search_area(latitude, longitude, radius_km)
    box = bounding_box(latitude, longitude, radius_km)

    with bounded_query(timeout):
        pubs = list(with_rating_aggregates(pubs_in_bounding_box(box)))

    for pub in pubs:
        pub.distance_km = haversine_km(latitude, longitude, pub.latitude, pub.longitude)

    if strict:
        pubs = [pub for pub in pubs if pub.distance_km <= radius_km]

    logger.debug(
        "Nearby search (%.5f, %.5f) r=%skm strict=%s -> %d pubs",
        latitude, longitude, radius_km, strict, len(pubs),
    )
    return pubs
