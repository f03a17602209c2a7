"""
Photos services - Business logic layer.

Uploads (multipart and base64 data URIs), lookup and owner-only deletion.
"""

from .photo_management import (
    create_photo,
    create_photo_from_base64,
    decode_data_uri,
    get_photo_by_id,
    delete_photo,
    get_pub_photos,
)

from .exceptions import (
    PhotosServiceError,
    PhotoNotFoundError,
    InvalidImageError,
    PhotoTargetMismatchError,
    UnauthorizedPhotoActionError,
)

__all__ = [
    # Photo Management Services
    'create_photo',
    'create_photo_from_base64',
    'decode_data_uri',
    'get_photo_by_id',
    'delete_photo',
    'get_pub_photos',
    # Exceptions
    'PhotosServiceError',
    'PhotoNotFoundError',
    'InvalidImageError',
    'PhotoTargetMismatchError',
    'UnauthorizedPhotoActionError',
]
