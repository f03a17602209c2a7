from django.contrib import admin
from .models import Rating


@admin.register(Rating)
class RatingAdmin(admin.ModelAdmin):
    """Admin interface for Ratings."""

    list_display = [
        'pub',
        'user',
        'score',
        'date'
    ]
    list_filter = [
        'score',
        'date'
    ]
    search_fields = [
        'pub__name',
        'user__email',
        'user__username',
        'comment'
    ]
    readonly_fields = ['date', 'updated_at']
    date_hierarchy = 'date'
    ordering = ['-date']

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.select_related('pub', 'user')
