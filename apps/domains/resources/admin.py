from django.contrib import admin

from .models import Resource


@admin.register(Resource)
class ResourceAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "uploader", "college", "privacy", "average_rating", "total_ratings", "created_at")
    list_display_links = ("id", "title")
    list_filter = ("privacy", "is_exam_important", "resource_type")
    search_fields = ("title", "subject", "uploader__name", "college")
    ordering = ("-created_at",)
    readonly_fields = ("college", "average_rating", "total_ratings", "created_at", "updated_at")
