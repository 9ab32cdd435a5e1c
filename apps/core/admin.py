# PATH: apps/core/admin.py
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from apps.core.models import User


@admin.register(User)
class ProfileUserAdmin(UserAdmin):
    list_display = ("id", "username", "name", "college", "branch", "semester", "is_active")
    list_filter = ("college", "is_active", "is_staff")
    search_fields = ("username", "name", "college")
    fieldsets = UserAdmin.fieldsets + (
        ("Profile", {"fields": ("name", "college", "course", "branch", "semester", "profile_image_url")}),
    )
