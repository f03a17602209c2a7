from django.contrib import admin
from .models import Photo


@admin.register(Photo)
class PhotoAdmin(admin.ModelAdmin):
    """Admin interface for Photos."""

    list_display = ['id', 'user', 'pub', 'rating', 'created_at']
    list_filter = ['created_at']
    search_fields = ['user__email', 'pub__name']
    readonly_fields = ['created_at']
    ordering = ['-created_at']
