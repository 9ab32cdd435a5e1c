from django.contrib import admin

from .models import ResourceRequest


@admin.register(ResourceRequest)
class ResourceRequestAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "requester", "status", "fulfilled_resource_id", "created_at")
    list_display_links = ("id", "title")
    list_filter = ("status",)
    search_fields = ("title", "subject", "requester__name")
    ordering = ("-created_at",)
