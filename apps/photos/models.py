from django.db import models
import os
import uuid


def photo_upload_path(instance, filename):
    """Store uploads as photos/<uuid><ext>, keeping only the original extension."""
    _, ext = os.path.splitext(filename)
    return f"photos/{uuid.uuid4()}{ext.lower()}"


class Photo(models.Model):
    """An uploaded image, optionally attached to a pub and/or a rating."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    image = models.FileField(upload_to=photo_upload_path, max_length=255)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='photos')
    pub = models.ForeignKey('pubs.Pub', on_delete=models.CASCADE, null=True, blank=True, related_name='photos')
    rating = models.ForeignKey('ratings.Rating', on_delete=models.CASCADE, null=True, blank=True, related_name='photos')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'photos'
        indexes = [
            models.Index(fields=['pub', 'created_at'], name='photos_pub_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"Photo {self.id} by {self.user.username}"
