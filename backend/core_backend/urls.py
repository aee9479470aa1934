"""
URL configuration for the cafe POS backend.

Every API route lives under ``/api/``; each app registers its own router.
"""

from django.contrib import admin
from django.urls import path, include
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from .views import health_check


urlpatterns = [
    path("api/health/", health_check, name="health_check"),
    path("admin/", admin.site.urls),
    path("api/auth/token/", TokenObtainPairView.as_view(), name="token_obtain_pair"),
    path("api/auth/token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
    # Each app registers its own base endpoint (e.g. 'orders'), so mount at "api/".
    path("api/", include("orders.urls")),
    path("api/", include("tables.urls")),
    path("api/", include("products.urls")),
    path("api/settings/", include("settings.urls")),
    path("api/", include("reports.urls")),
]
