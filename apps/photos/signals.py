"""Keep stored photo files in step with Photo rows."""

import logging

from django.db import transaction
from django.db.models.signals import post_delete
from django.dispatch import receiver

from .models import Photo

logger = logging.getLogger(__name__)


@receiver(post_delete, sender=Photo)
def delete_photo_file(sender, instance, **kwargs):
    """
    Remove the stored image once a Photo row is gone.

    Fires for direct deletes and for rows removed by a cascade from a pub,
    rating or user. The file goes only after the transaction commits, so a
    rolled back delete keeps its image.
    """
    if not instance.image:
        return

    storage = instance.image.storage
    name = instance.image.name

    def remove():
        storage.delete(name)
        logger.info("Removed photo file %s", name)

    transaction.on_commit(remove)
