"""Services for pubs business logic."""

from .exceptions import (
    PubsServiceError,
    PubNotFoundError,
    InvalidCoordinatesError,
    InvalidRadiusError,
)
from .geo import (
    BoundingBox,
    bounding_box,
    haversine_km,
    validate_coordinates,
    validate_search_area,
    KM_PER_DEGREE,
    EARTH_RADIUS_KM,
    MAX_SEARCH_LATITUDE,
)
from .rating_aggregation import (
    format_average,
    with_rating_aggregates,
    get_pub_rating_summary,
)
from .pub_search import (
    list_pubs,
    pubs_in_bounding_box,
    find_nearby_pubs,
    DEFAULT_RADIUS_KM,
)
from .pub_management import (
    create_pub,
    get_pub_by_id,
    update_pub,
    delete_pub,
)

__all__ = [
    # Exceptions
    'PubsServiceError',
    'PubNotFoundError',
    'InvalidCoordinatesError',
    'InvalidRadiusError',
    # Geo
    'BoundingBox',
    'bounding_box',
    'haversine_km',
    'validate_coordinates',
    'validate_search_area',
    'KM_PER_DEGREE',
    'EARTH_RADIUS_KM',
    'MAX_SEARCH_LATITUDE',
    # Rating Aggregation
    'format_average',
    'with_rating_aggregates',
    'get_pub_rating_summary',
    # Pub Search
    'list_pubs',
    'pubs_in_bounding_box',
    'find_nearby_pubs',
    'DEFAULT_RADIUS_KM',
    # Pub Management
    'create_pub',
    'get_pub_by_id',
    'update_pub',
    'delete_pub',
]
