# apps/api/v1/urls.py
from django.urls import path, include

urlpatterns = [
    # =========================
    # Core (회원가입 / 프로필)
    # =========================
    path("core/", include("apps.core.urls")),

    # =========================
    # Domain APIs
    # =========================
    path("resources/", include("apps.domains.resources.urls")),
    path("reviews/", include("apps.domains.reviews.urls")),
    path("requests/", include("apps.domains.resource_requests.urls")),
    path("leaderboard/", include("apps.domains.leaderboard.urls")),
]
