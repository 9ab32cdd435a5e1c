from django.urls import path, include
from rest_framework.routers import SimpleRouter

from .views import ResourceViewSet

# prefix 없이 등록: /api/v1/resources/, /api/v1/resources/{id}/
router = SimpleRouter()
router.register(r"", ResourceViewSet, basename="resources")

urlpatterns = [
    path("", include(router.urls)),
]
