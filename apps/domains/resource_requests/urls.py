from django.urls import path, include
from rest_framework.routers import SimpleRouter

from .views import ResourceRequestViewSet

router = SimpleRouter()
router.register(r"", ResourceRequestViewSet, basename="resource-requests")

urlpatterns = [
    path("", include(router.urls)),
]
