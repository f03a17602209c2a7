from django.contrib import admin
from django.db.models import Avg, Count
from apps.pubs.models import Pub


@admin.register(Pub)
class PubAdmin(admin.ModelAdmin):
    """Admin interface for Pubs."""

    list_display = [
        'name',
        'address',
        'latitude',
        'longitude',
        'average_rating',
        'rating_count',
        'created_at'
    ]
    search_fields = [
        'name',
        'address',
    ]
    readonly_fields = [
        'created_by',
        'created_at',
        'updated_at'
    ]
    ordering = ['name']

    def get_queryset(self, request):
        """Annotate the derived rating aggregate."""
        qs = super().get_queryset(request)
        return qs.annotate(_average_rating=Avg('ratings__score'), _rating_count=Count('ratings'))

    def average_rating(self, obj):
        if obj._average_rating is None:
            return '-'
        return f"{obj._average_rating:.1f}"
    average_rating.short_description = 'Avg Rating'

    def rating_count(self, obj):
        return obj._rating_count
    rating_count.short_description = 'Ratings'
