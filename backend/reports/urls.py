from django.urls import path

from . import views

app_name = "reports"

urlpatterns = [
    path("dashboard/stats/", views.dashboard_stats, name="dashboard-stats"),
    path("reports/", views.sales_report, name="sales-report"),
]
