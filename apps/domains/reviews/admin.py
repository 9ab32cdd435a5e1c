from django.contrib import admin

from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ("id", "resource", "user", "rating", "created_at")
    list_display_links = ("id", "resource")
    list_filter = ("rating",)
    search_fields = ("resource__title", "user__name", "comment")
    ordering = ("-created_at",)
