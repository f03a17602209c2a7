from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
import uuid

MIN_SCORE = 1.0
MAX_SCORE = 10.0


class Rating(models.Model):
    """A user's score (1-10) and optional comment for a pub."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='ratings')
    pub = models.ForeignKey('pubs.Pub', on_delete=models.CASCADE, related_name='ratings')
    score = models.FloatField(validators=[MinValueValidator(MIN_SCORE), MaxValueValidator(MAX_SCORE)])
    comment = models.TextField(blank=True)
    date = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'ratings'
        indexes = [
            models.Index(fields=['pub', 'date'], name='ratings_pub_date_idx'),
            models.Index(fields=['user', 'date'], name='ratings_user_date_idx'),
        ]
        ordering = ['-date']

    def __str__(self):
        return f"{self.user.username} - {self.pub.name} ({self.score:g}/10)"
