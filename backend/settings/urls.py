from django.urls import path

from .views import GlobalSettingsView

app_name = "settings"

urlpatterns = [
    path("", GlobalSettingsView.as_view(), name="global-settings"),
]
