"""Photo management service - upload, lookup and deletion of photos."""

import base64
import binascii
import logging
import re
import uuid

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.files.base import ContentFile
from django.db import DatabaseError, transaction
from django.db.models import QuerySet
from typing import Optional, Tuple
from uuid import UUID

from apps.accounts.models import User
from apps.pubs.models import Pub
from apps.ratings.models import Rating
from apps.photos.models import Photo
from .exceptions import (
    PhotoNotFoundError,
    InvalidImageError,
    PhotoTargetMismatchError,
    UnauthorizedPhotoActionError,
    PubNotFoundError,
    RatingNotFoundError,
)

logger = logging.getLogger(__name__)

INVALID_ID_ERRORS = (DjangoValidationError, ValueError)

DATA_URI_PATTERN = re.compile(r'^data:([A-Za-z-+/]+);base64,(.+)$', re.DOTALL)

EXTENSION_OVERRIDES = {
    'jpeg': 'jpg',
    'svg+xml': 'svg',
}


def _resolve_targets(
    user: User,
    pub_id: Optional[UUID],
    rating_id: Optional[UUID],
) -> Tuple[Optional[Pub], Optional[Rating]]:
    """
    Look up the pub and rating a photo is attached to.

    A rating must belong to the uploading user. When only a rating is
    given, the photo is attached to the rating's pub as well.
    """
    pub = None
    rating = None

    if pub_id:
        try:
            pub = Pub.objects.get(id=pub_id)
        except (Pub.DoesNotExist, *INVALID_ID_ERRORS):
            raise PubNotFoundError("Pub not found")

    if rating_id:
        try:
            rating = Rating.objects.get(id=rating_id)
        except (Rating.DoesNotExist, *INVALID_ID_ERRORS):
            raise RatingNotFoundError("Rating not found")

        if rating.user_id != user.id:
            raise UnauthorizedPhotoActionError("You can only add photos to your own ratings")

        if pub is None:
            pub = rating.pub
        elif rating.pub_id != pub.id:
            raise PhotoTargetMismatchError("Rating does not belong to this pub")

    return pub, rating


@transaction.atomic
def create_photo(
    *,
    user: User,
    image,
    pub_id: Optional[UUID] = None,
    rating_id: Optional[UUID] = None,
) -> Photo:
    """
    Store an uploaded image and record it as a photo.

    Args:
        user: Uploading user
        image: Uploaded file (UploadedFile or ContentFile)
        pub_id: Optional pub to attach the photo to
        rating_id: Optional rating to attach the photo to (must be the user's)

    Returns:
        Created Photo instance

    Raises:
        InvalidImageError: If no file or an empty file was sent
        PubNotFoundError: If pub doesn't exist
        RatingNotFoundError: If rating doesn't exist
        UnauthorizedPhotoActionError: If rating belongs to another user
        PhotoTargetMismatchError: If rating belongs to a different pub
    """
    if image is None or not getattr(image, 'size', 0):
        raise InvalidImageError("No image uploaded")

    pub, rating = _resolve_targets(user, pub_id, rating_id)

    photo = Photo(user=user, pub=pub, rating=rating)
    photo.image.save(image.name or 'upload', image, save=False)
    try:
        photo.save()
    except DatabaseError:
        # The file is already in storage but no row points at it
        photo.image.delete(save=False)
        raise

    logger.info("User %s uploaded photo %s (pub=%s, rating=%s)", user.id, photo.id, pub_id, rating_id)
    return photo


def decode_data_uri(data_uri: str) -> ContentFile:
    """
    Turn a ``data:<mime>;base64,<payload>`` string into a named file.

    Raises:
        InvalidImageError: If the string is not a base64 image data URI
    """
    if not data_uri or not isinstance(data_uri, str):
        raise InvalidImageError("No image data provided")

    match = DATA_URI_PATTERN.match(data_uri.strip())
    if not match:
        raise InvalidImageError("Invalid image data")

    mime_type, payload = match.groups()
    major, _, subtype = mime_type.lower().partition('/')
    if major != 'image' or not subtype:
        raise InvalidImageError("Only image data can be uploaded")

    try:
        content = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        raise InvalidImageError("Invalid image data")

    if not content:
        raise InvalidImageError("Invalid image data")

    extension = EXTENSION_OVERRIDES.get(subtype, subtype)
    return ContentFile(content, name=f"{uuid.uuid4()}.{extension}")


def create_photo_from_base64(
    *,
    user: User,
    data_uri: str,
    pub_id: Optional[UUID] = None,
    rating_id: Optional[UUID] = None,
) -> Photo:
    """
    Store a base64 encoded image sent as a data URI.

    Same attachment rules as create_photo.

    Raises:
        InvalidImageError: If the data URI is malformed
    """
    image = decode_data_uri(data_uri)
    return create_photo(user=user, image=image, pub_id=pub_id, rating_id=rating_id)


def get_photo_by_id(*, photo_id: UUID) -> Photo:
    """
    Retrieve a photo by ID.

    Raises:
        PhotoNotFoundError: If photo doesn't exist
    """
    try:
        return Photo.objects.select_related('user').get(id=photo_id)
    except (Photo.DoesNotExist, *INVALID_ID_ERRORS):
        raise PhotoNotFoundError("Photo not found")


@transaction.atomic
def delete_photo(*, photo_id: UUID, user: User) -> None:
    """
    Delete a photo and its stored file.

    Only the uploader can delete a photo.

    Raises:
        PhotoNotFoundError: If photo doesn't exist
        UnauthorizedPhotoActionError: If user is not the uploader
    """
    try:
        photo = Photo.objects.select_for_update().get(id=photo_id)
    except (Photo.DoesNotExist, *INVALID_ID_ERRORS):
        raise PhotoNotFoundError("Photo not found")

    if photo.user_id != user.id:
        raise UnauthorizedPhotoActionError("You can only delete your own photos")

    storage_name = photo.image.name
    photo.delete()

    logger.info("Deleted photo %s (%s)", photo_id, storage_name)


def get_pub_photos(*, pub_id: UUID) -> QuerySet[Photo]:
    """
    All photos of a pub, newest first.

    Raises:
        PubNotFoundError: If pub doesn't exist
    """
    try:
        if not Pub.objects.filter(id=pub_id).exists():
            raise PubNotFoundError("Pub not found")
    except INVALID_ID_ERRORS:
        raise PubNotFoundError("Pub not found")

    return (
        Photo.objects
        .filter(pub_id=pub_id)
        .select_related('user')
        .order_by('-created_at')
    )
