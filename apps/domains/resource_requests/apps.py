from django.apps import AppConfig


class ResourceRequestsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.domains.resource_requests"
    label = "resource_requests"
