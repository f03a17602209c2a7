"""
Geo proximity helpers.

The nearby search approximates a circle of radius ``r`` with an
axis-aligned latitude/longitude box so it can be expressed as two range
predicates. The box may contain points up to about ``r * sqrt(2)`` away
(its corners); ``haversine_km`` is used when exact circular membership is
wanted.
"""

import math
from dataclasses import dataclass
from decimal import Decimal

from .exceptions import InvalidCoordinatesError, InvalidRadiusError

KM_PER_DEGREE = 111.0  # Approx length of one degree of latitude
EARTH_RADIUS_KM = 6371.0088  # Mean Earth radius (IUGG)
MAX_SEARCH_LATITUDE = 85.0  # cos(lat) -> 0 beyond this, longitude window diverges


@dataclass(frozen=True)
class BoundingBox:
    """Latitude/longitude rectangle. Longitudes may run past +/-180."""

    min_latitude: float
    max_latitude: float
    min_longitude: float
    max_longitude: float

    @property
    def covers_all_longitudes(self) -> bool:
        return self.max_longitude - self.min_longitude >= 360.0

    def longitude_ranges(self) -> list[tuple[float, float]]:
        """
        Longitude window as one or two ranges inside [-180, 180].

        A window crossing the antimeridian is split in two.
        """
        if self.covers_all_longitudes:
            return [(-180.0, 180.0)]
        if self.min_longitude < -180.0:
            return [(self.min_longitude + 360.0, 180.0), (-180.0, self.max_longitude)]
        if self.max_longitude > 180.0:
            return [(self.min_longitude, 180.0), (-180.0, self.max_longitude - 360.0)]
        return [(self.min_longitude, self.max_longitude)]

    def contains(self, latitude: float, longitude: float) -> bool:
        if not self.min_latitude <= latitude <= self.max_latitude:
            return False
        return any(low <= longitude <= high for low, high in self.longitude_ranges())


def _as_float(value, name, error_cls):
    if value is None or value == '':
        raise error_cls(f"{name} is required")
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal, str)):
        raise error_cls(f"{name} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise error_cls(f"{name} must be a number")
    if not math.isfinite(number):
        raise error_cls(f"{name} must be a finite number")
    return number


def validate_coordinates(latitude, longitude) -> tuple[float, float]:
    """
    Validate a stored pub position.

    Returns:
        (latitude, longitude) as floats

    Raises:
        InvalidCoordinatesError: If missing, not numeric or out of range
    """
    latitude = _as_float(latitude, 'Latitude', InvalidCoordinatesError)
    longitude = _as_float(longitude, 'Longitude', InvalidCoordinatesError)

    if not -90.0 <= latitude <= 90.0:
        raise InvalidCoordinatesError("Latitude must be between -90 and 90")
    if not -180.0 <= longitude <= 180.0:
        raise InvalidCoordinatesError("Longitude must be between -180 and 180")

    return latitude, longitude


def validate_search_area(latitude, longitude, radius_km) -> tuple[float, float, float]:
    """
    Validate a nearby search request.

    Same ranges as ``validate_coordinates`` plus a pole guard: centers with
    ``|latitude| > MAX_SEARCH_LATITUDE`` are rejected.

    Raises:
        InvalidCoordinatesError: Bad center point
        InvalidRadiusError: Radius missing, not numeric or not > 0
    """
    latitude, longitude = validate_coordinates(latitude, longitude)
    radius_km = _as_float(radius_km, 'Radius', InvalidRadiusError)

    if radius_km <= 0:
        raise InvalidRadiusError("Radius must be greater than 0")
    if abs(latitude) > MAX_SEARCH_LATITUDE:
        raise InvalidCoordinatesError(
            f"Latitude must be between -{MAX_SEARCH_LATITUDE:g} and {MAX_SEARCH_LATITUDE:g} for nearby searches"
        )

    return latitude, longitude, radius_km


def bounding_box(latitude: float, longitude: float, radius_km: float) -> BoundingBox:
    """
    Box around (latitude, longitude) approximating a circle of radius_km.

    dlat = r / 111 and dlng = r / (111 * cos(lat)). At high latitudes with
    large radii the circle bulges slightly past dlng; the window is widened
    to the circle's true longitude extent there so no point within radius_km
    falls outside. A circle reaching a pole spans every longitude.

    Inputs are expected to be validated (see validate_search_area).
    """
    lat_delta = radius_km / KM_PER_DEGREE
    lng_delta = radius_km / (KM_PER_DEGREE * math.cos(math.radians(latitude)))

    angular = radius_km / EARTH_RADIUS_KM
    cos_lat = math.cos(math.radians(latitude))
    if angular >= math.pi or math.sin(min(angular, math.pi / 2)) >= cos_lat:
        lng_delta = 180.0
    else:
        exact = math.degrees(math.asin(math.sin(angular) / cos_lat))
        lng_delta = max(lng_delta, exact)

    return BoundingBox(
        min_latitude=max(latitude - lat_delta, -90.0),
        max_latitude=min(latitude + lat_delta, 90.0),
        min_longitude=longitude - lng_delta,
        max_longitude=longitude + lng_delta,
    )


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance in kilometers."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(a)))
