"""Domain-specific exceptions for pubs services."""

from apps.common.exceptions import NotFoundError, PintPerfectError, ValidationError


class PubsServiceError(PintPerfectError):
    """Base exception for pubs services."""
    pass


class PubNotFoundError(PubsServiceError, NotFoundError):
    """Raised when pub does not exist."""
    pass


class InvalidCoordinatesError(PubsServiceError, ValidationError):
    """Raised when latitude/longitude are missing, not numeric or out of range."""
    pass


class InvalidRadiusError(PubsServiceError, ValidationError):
    """Raised when search radius is not a positive number."""
    pass
