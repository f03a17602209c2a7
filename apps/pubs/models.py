from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
import uuid


class Pub(models.Model):
    """
    A venue with a fixed location.

    The average rating is never stored here; it is derived from the live
    ratings on every read (see services.rating_aggregation).
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200, db_index=True)
    address = models.CharField(max_length=300)
    latitude = models.FloatField(validators=[MinValueValidator(-90.0), MaxValueValidator(90.0)])
    longitude = models.FloatField(validators=[MinValueValidator(-180.0), MaxValueValidator(180.0)])
    phone_number = models.CharField(max_length=50, blank=True)
    website = models.URLField(max_length=500, blank=True)
    opening_hours = models.CharField(max_length=500, blank=True)
    created_by = models.ForeignKey('accounts.User', on_delete=models.SET_NULL, null=True, blank=True, related_name='created_pubs')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'pubs'
        indexes = [
            models.Index(fields=['latitude', 'longitude'], name='pubs_lat_lng_idx'),
            models.Index(fields=['created_at'], name='pubs_created_idx'),
        ]
        ordering = ['name']

    def __str__(self):
        return self.name
